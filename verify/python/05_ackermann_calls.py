# Test: Ackermann call count for A(2, 3)
def count_calls(m, n):
    calls = [0]

    def ack(m, n):
        calls[0] += 1
        if m == 0:
            return n + 1
        if n == 0:
            return ack(m - 1, 1)
        return ack(m - 1, ack(m, n - 1))

    ack(m, n)
    return calls[0]

def main():
    return count_calls(2, 3)

print(main())
