"""Client records, appended to a text file whenever they change."""

from __future__ import annotations

from pathlib import Path


def _split_fields(linea: str, delimitadores: str) -> list[str]:
    """Split ``linea`` field by field, one delimiter per field, as a stream read would."""
    resto = linea.rstrip("\r\n")
    campos = []
    for delim in delimitadores:
        campo, _, resto = resto.partition(delim)
        campos.append(campo)
    return campos


def _campo(nombre: str) -> property:
    attr = f"_{nombre}"

    def leer(self: Cliente) -> str:
        return getattr(self, attr)

    def escribir(self: Cliente, valor: str) -> None:
        setattr(self, attr, valor)
        self._guardar()

    return property(leer, escribir, doc=f"The client's {nombre}.")


class Cliente:
    """A client's contact data.

    When ``archivo`` is given, the record is appended to that file on
    construction and again after every change to a field.
    """

    nombre = _campo("nombre")
    profesion = _campo("profesion")
    telefono = _campo("telefono")
    correo = _campo("correo")

    def __init__(
        self,
        nombre: str,
        profesion: str,
        telefono: str,
        correo: str,
        archivo: str | Path | None = None,
    ) -> None:
        self._nombre = nombre
        self._profesion = profesion
        self._telefono = telefono
        self._correo = correo
        self.archivo = Path(archivo) if archivo is not None else None
        self._guardar()

    def _guardar(self) -> None:
        if self.archivo is None:
            return
        self.archivo.parent.mkdir(parents=True, exist_ok=True)
        with self.archivo.open("a", encoding="utf-8") as fh:
            fh.write(self.to_line() + "\n")

    def describir(self) -> str:
        """Human-readable description of the client."""
        return "\n".join(
            [
                "- Datos del Cliente -",
                f"Nombre: {self._nombre}",
                f"Profesion: {self._profesion}",
                f"Telefono: {self._telefono}",
                f"Correo: {self._correo}",
            ]
        )

    def to_line(self) -> str:
        """The stored record form: comma-separated fields ending in a period."""
        return f"{self._nombre},{self._profesion},{self._telefono},{self._correo}."

    @classmethod
    def from_line(cls, linea: str, archivo: str | Path | None = None) -> Cliente:
        """Parse a stored record; the e-mail field ends at its first period."""
        nombre, profesion, telefono, correo = _split_fields(linea, ",,,.")
        return cls(nombre, profesion, telefono, correo, archivo)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cliente):
            return NotImplemented
        return self.to_line() == other.to_line()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Cliente(nombre={self._nombre!r}, profesion={self._profesion!r}, "
            f"telefono={self._telefono!r}, correo={self._correo!r})"
        )