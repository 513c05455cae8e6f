"""A mutable four-octet IPv4 address value."""

from __future__ import annotations


class IPAddress:
    """An IPv4 address held as four octets.

    Accepts no arguments (0.0.0.0), four octets, a 32-bit integer whose low
    byte is the first octet, four bytes, or another address.
    """

    __hash__ = None

    def __init__(self, *args):
        if not args:
            octets = bytes(4)
        elif len(args) == 4:
            for octet in args:
                if not 0 <= octet <= 255:
                    raise ValueError(f"octet out of range: {octet}")
            octets = bytes(args)
        elif len(args) == 1:
            value = args[0]
            if isinstance(value, IPAddress):
                octets = bytes(value)
            elif isinstance(value, int):
                if not 0 <= value <= 0xFFFFFFFF:
                    raise ValueError(f"address out of range: {value}")
                octets = value.to_bytes(4, "little")
            else:
                octets = bytes(value)
                if len(octets) != 4:
                    raise ValueError("an address needs exactly four bytes")
        else:
            raise TypeError("IPAddress takes 0, 1 or 4 arguments")
        self._octets = bytearray(octets)

    @classmethod
    def from_string(cls, address):
        """Parse dotted-quad text; raise ValueError if it is not one."""
        octets = []
        acc = 0
        for ch in address:
            if "0" <= ch <= "9":
                acc = acc * 10 + ord(ch) - ord("0")
                if acc > 255:
                    raise ValueError(f"octet out of range in {address!r}")
            elif ch == ".":
                if len(octets) == 3:
                    raise ValueError(f"too many dots in {address!r}")
                octets.append(acc)
                acc = 0
            else:
                raise ValueError(f"invalid character {ch!r} in {address!r}")
        if len(octets) != 3:
            raise ValueError(f"too few dots in {address!r}")
        octets.append(acc)
        return cls(*octets)

    def __int__(self):
        return int.from_bytes(self._octets, "little")

    def __bytes__(self):
        return bytes(self._octets)

    def __eq__(self, other):
        if isinstance(other, IPAddress):
            return self._octets == other._octets
        if isinstance(other, int):
            return int(self) == other
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(other[:4]) == bytes(self._octets)
        return NotImplemented

    def __getitem__(self, index):
        return self._octets[index]

    def __setitem__(self, index, value):
        self._octets[index] = value

    def __str__(self):
        return ".".join(str(octet) for octet in self._octets)

    def __repr__(self):
        return f"IPAddress({', '.join(str(o) for o in self._octets)})"

    def print_to(self, printer):
        """Print the dotted form to ``printer``; return the bytes written."""
        count = 0
        for octet in self._octets[:3]:
            count += printer.print(octet)
            count += printer.print(".")
        count += printer.print(self._octets[3])
        return count


INADDR_NONE = IPAddress(0, 0, 0, 0)