import struct
from dataclasses import dataclass
from typing import IO, Callable, Generic, Sequence, TypeVar

from nuru.kernel.stream import read_exact

T_Struct = TypeVar('T_Struct')


@dataclass(frozen=True)
class StructuredTuple(Generic[T_Struct]):
    """Fixed layout header read from a stream into a factory.

    _fields: attribute names, in the order of the struct format

    _structure: struct layout of the record

    _factory: callable receiving the fields as keyword arguments
    """

    _fields: Sequence[str]
    _structure: struct.Struct
    _factory: Callable[..., T_Struct]

    def unpack(self, stream: IO[bytes]) -> T_Struct:
        values = self._structure.unpack(read_exact(stream, self._structure.size))
        return self._factory(**dict(zip(self._fields, values)))
