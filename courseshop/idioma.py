"""Language selection state."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_TRUE_VALUES = {"Activo", "true", "1"}
DEFAULT_RUTA = Path("Idioma") / "estado_idioma.txt"


@dataclass
class Idioma:
    """A language, the selected variant, and whether it is active."""

    activo: bool
    idioma: str
    seleccion: str

    def activar(self) -> None:
        self.activo = True

    def desactivar(self) -> None:
        self.activo = False

    def describir(self) -> str:
        """Human-readable status."""
        estado = "Activo" if self.activo else "Nulo"
        return f"Seleccionado: {self.seleccion}\nEstado: {estado}"

    def to_line(self) -> str:
        """The stored record form."""
        return f"{'1' if self.activo else '0'},{self.idioma},{self.seleccion}."

    def guardar(self, ruta: str | Path = DEFAULT_RUTA) -> Path:
        """Overwrite ``ruta`` with this state and return the path."""
        path = Path(ruta)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_line() + "\n", encoding="utf-8")
        return path

    @classmethod
    def from_line(cls, linea: str) -> Idioma:
        """Parse a stored record."""
        resto = linea.rstrip("\r\n")
        activo, _, resto = resto.partition(",")
        idioma, _, resto = resto.partition(",")
        seleccion, _, _ = resto.partition(".")
        return cls(activo in _TRUE_VALUES, idioma, seleccion)