#!/usr/bin/env python3
# Ackermann benchmark - A(3, 10), stresses function call overhead
# Recursion depth reaches ~8190 frames for m = 3, n = 10
import sys
sys.setrecursionlimit(20000)

M = 3
N = 10

def ackermann(m, n):
    if m == 0:
        return n + 1
    if n == 0:
        return ackermann(m - 1, 1)
    return ackermann(m - 1, ackermann(m, n - 1))

# Same recurrence with an explicit stack of pending m values
def ackermann_iterative(m, n):
    if m < 0 or n < 0:
        raise ValueError(f"ackermann is undefined for negative input: ({m}, {n})")
    stack = [m]
    while stack:
        m = stack.pop()
        if m == 0:
            n = n + 1
        elif n == 0:
            n = 1
            stack.append(m - 1)
        else:
            stack.append(m - 1)
            stack.append(m)
            n = n - 1
    return n

def count_calls(m, n):
    """Evaluate A(m, n), returning (result, number of calls including the root)"""
    calls = 0

    def ack(m, n):
        nonlocal calls
        calls += 1
        if m == 0:
            return n + 1
        if n == 0:
            return ack(m - 1, 1)
        return ack(m - 1, ack(m, n - 1))

    result = ack(m, n)
    return result, calls

def main():
    return ackermann(M, N)

if __name__ == "__main__":
    print(main())
