import os
import socket
import logging

logger = logging.getLogger("pyask")
logger.addHandler(logging.NullHandler())

PORT = 12013


class UDPHandler(logging.Handler):
    """Send log records to a local UDP port, where ``pyask --listen`` prints them."""

    udp_address = ("127.0.0.1", PORT)

    def __init__(self):
        super().__init__()
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def emit(self, record):
        try:
            msg = self.format(record)
        except Exception:
            self.handleError(record)
            return
        bb = msg.encode()
        size = 2**10
        try:
            while bb:
                bb1 = bb[:size]
                bb = bb[size:]
                self._socket.sendto(bb1, self.udp_address)
        except OSError:
            self.handleError(record)

    def close(self):
        self._socket.close()
        super().close()


def enable_log_forwarding():
    """Forward the pyask logs over UDP, unless that is already done."""
    if not any(isinstance(h, UDPHandler) for h in logger.handlers):
        logger.setLevel(logging.DEBUG)
        logger.addHandler(UDPHandler())


if os.environ.get("PYASK_LOG_UDP", "").lower() in ("1", "true", "yes"):
    enable_log_forwarding()


def bind_log_socket(port=PORT):
    """Create the UDP socket that the forwarded logs arrive at."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", port))
    return sock


def listen_to_logs(sock=None, max_messages=None):
    """Called from ``pyask --listen``

    This way we can see the logs from another process, so they don't get
    mixed up with the prompt that is being shown. Runs until interrupted,
    or until max_messages have been printed.
    """

    if sock is None:
        sock = bind_log_socket()
    count = 0
    with sock:
        while max_messages is None or count < max_messages:
            data, addr = sock.recvfrom(2**20)
            print(data.decode())
            count += 1
