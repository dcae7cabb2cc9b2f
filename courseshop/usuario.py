"""User accounts: a client, credentials and a premium status."""

from __future__ import annotations

from pathlib import Path

from courseshop.cliente import Cliente, _split_fields
from courseshop.premium import Premium

_TRUE_VALUES = {"Activo", "true", "1"}
_COMPRAS = Path("ListaUsuario") / "Compras" / "Curso_adquirido.txt"
_CLIENTES = Path("Clientes") / "cliente.txt"


class Usuario(Premium):
    """A user account with premium status persisted under ``base_dir``."""

    def __init__(
        self,
        cliente: Cliente,
        usuario: str = "",
        contra: str = "",
        base_dir: str | Path = ".",
    ) -> None:
        super().__init__(False)
        self.cliente = cliente
        self.usuario = usuario
        self.contra = contra
        self.base_dir = Path(base_dir)

    def serializar(self) -> str:
        """The stored record form of the account."""
        c = self.cliente
        estado = "Activo" if self.estado else "Inactivo"
        return (
            f"{c.nombre},{c.profesion},{c.telefono},{c.correo},"
            f"{self.usuario},{self.contra},{estado}."
        )

    def describir(self) -> str:
        """Human-readable description of the account."""
        return "\n".join(
            [
                "",
                "\t--- Datos del Usuario ---",
                self.cliente.describir(),
                f"Usuario: {self.usuario}",
                f"Contraseña: {self.contra}",
                super().describir(),
            ]
        )

    def activar(self) -> None:
        """Turn premium on and store it under the client's e-mail."""
        super().activar()
        self.guardar(self.cliente.correo, self.base_dir)

    def desactivar(self) -> None:
        """Turn premium off and store it under the client's e-mail."""
        super().desactivar()
        self.guardar(self.cliente.correo, self.base_dir)

    def cargar_estado_premium(self) -> bool:
        """Load the premium status stored under the user name and return it."""
        self.estado = Premium.cargar(self.usuario, self.base_dir).estado
        return self.estado

    def cursos_adquiridos(self) -> list[str]:
        """Lines of the purchased-courses file; raises FileNotFoundError if absent."""
        path = self.base_dir / _COMPRAS
        return path.read_text(encoding="utf-8").splitlines()

    @classmethod
    def from_line(cls, linea: str, base_dir: str | Path = ".") -> Usuario:
        """Parse a stored account, recording the client and storing its premium status."""
        nombre, profesion, telefono, correo, usuario, contra, premium = _split_fields(
            linea, ",,,,,,."
        )
        base = Path(base_dir)
        cliente = Cliente(nombre, profesion, telefono, correo, base / _CLIENTES)
        cuenta = cls(cliente, usuario, contra, base)
        if premium in _TRUE_VALUES:
            cuenta.activar()
        else:
            cuenta.desactivar()
        return cuenta

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Usuario):
            return NotImplemented
        return self.serializar() == other.serializar()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Usuario(cliente={self.cliente!r}, usuario={self.usuario!r}, "
            f"estado={self.estado!r})"
        )