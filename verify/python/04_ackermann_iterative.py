# Test: Ackermann with an explicit stack, deeper than the default recursion limit
def ack_iter(m, n):
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

def main():
    return ack_iter(1, 50000)

print(main())
