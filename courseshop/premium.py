"""Premium account status, stored per user."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_SUBDIR = Path("ListaUsuario") / "Premium"
_TRUE_VALUES = {"Activo", "true", "1"}


def _ruta(nombre_usuario: str, base_dir: str | Path) -> Path:
    return Path(base_dir) / _SUBDIR / f"premium_{nombre_usuario}.txt"


@dataclass
class Premium:
    """Whether an account has premium status."""

    estado: bool = False

    def activar(self) -> None:
        self.estado = True

    def desactivar(self) -> None:
        self.estado = False

    def describir(self) -> str:
        """Human-readable status line."""
        return f"Estado Premium: {'Activo' if self.estado else 'Inactivo'}"

    def guardar(self, nombre_usuario: str, base_dir: str | Path = ".") -> Path:
        """Write the status to the user's premium file and return its path."""
        path = _ruta(nombre_usuario, base_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(("Activo" if self.estado else "Inactivo") + "\n", encoding="utf-8")
        return path

    @classmethod
    def cargar(cls, nombre_usuario: str, base_dir: str | Path = ".") -> Premium:
        """Read a stored status; only ``Activo`` counts, and a missing file means inactive."""
        try:
            contenido = _ruta(nombre_usuario, base_dir).read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls(False)
        lineas = contenido.splitlines()
        return cls(bool(lineas) and lineas[0] == "Activo")

    @classmethod
    def from_line(cls, linea: str) -> Premium:
        """Parse a status value: ``Activo``, ``true`` or ``1`` mean active."""
        return cls(linea in _TRUE_VALUES)