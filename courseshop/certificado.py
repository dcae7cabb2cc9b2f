"""Course certificate availability, stored per user and course."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_SUBDIR = Path("ListadoCurso") / "Certificado"
_TRUE_VALUES = {"Activo", "true", "1"}


def _ruta(nombre_usuario: str, curso: str, base_dir: str | Path) -> Path:
    nombre = f"{nombre_usuario}_{curso}" if curso else nombre_usuario
    return Path(base_dir) / _SUBDIR / f"{nombre}.txt"


@dataclass
class Certificado:
    """Whether a certificate is available."""

    estado: bool = False

    def activar(self) -> None:
        self.estado = True

    def desactivar(self) -> None:
        self.estado = False

    def describir(self) -> str:
        """Human-readable status line."""
        texto = "Disponible" if self.estado else "No Disponible"
        return f"Estado del Certificado: {texto}"

    def guardar(
        self,
        nombre_usuario: str,
        curso: str = "",
        base_dir: str | Path = ".",
    ) -> Path:
        """Write the status to the user's certificate file and return its path."""
        path = _ruta(nombre_usuario, curso, base_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("Activo" if self.estado else "Inactivo", encoding="utf-8")
        return path

    @classmethod
    def cargar(
        cls,
        nombre_usuario: str,
        curso: str = "",
        base_dir: str | Path = ".",
    ) -> Certificado:
        """Read a stored status; an absent or empty file yields an inactive certificate."""
        path = _ruta(nombre_usuario, curso, base_dir)
        try:
            contenido = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls(False)
        lineas = contenido.splitlines()
        if not lineas:
            return cls(False)
        return cls(lineas[0] in _TRUE_VALUES)