# PURPOSE: Tiny UDP responder for generating socket-table traffic by hand.
# ==============================================================================
import argparse
import socket


def build_reply(payload: bytes) -> bytes:
    """Echoes a DNS-style datagram back with the QR (response) bit set."""
    reply = bytearray(payload)
    # 0 - 1: ID
    # 2: QR(1): Opcode(4)
    if len(reply) > 2:
        reply[2] |= 0x80
    return bytes(reply)


def serve(host: str = "", port: int = 1234):
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind((host, port))
        print(f"Listening on udp {host or '*'}:{port}")
        while True:
            try:
                data, addr = sock.recvfrom(1024)
            except OSError:
                continue
            sock.sendto(build_reply(data), addr)


if __name__ == '__main__':
    p = argparse.ArgumentParser(description="UDP echo server for exporter testing")
    p.add_argument("--host", default="")
    p.add_argument("--port", type=int, default=1234)
    args = p.parse_args()
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        print("\nStopped.")
