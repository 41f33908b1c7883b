# Test: Ackermann base cases and small values
def ack(m, n):
    if m == 0:
        return n + 1
    if n == 0:
        return ack(m - 1, 1)
    return ack(m - 1, ack(m, n - 1))

def main():
    return ack(0, 0) + ack(1, 1) * 10 + ack(2, 3) * 100

print(main())
