"""Course line items and the header data of a sales receipt."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DetalleCurso:
    """One course line on a receipt: what was bought, at what price, how many."""

    codigo: str
    nombre: str
    categoria: str
    precio: float
    cantidad: int

    def total(self) -> float:
        """Line total: unit price times quantity."""
        return self.precio * self.cantidad


@dataclass
class DetalleBoleta:
    """Receipt header and the amounts computed for it."""

    empresa: str = "Coursera"
    num_operacion: str = ""
    fecha: str = ""
    hora: str = ""
    metodo_pago: str = ""
    correo: str = ""
    nombre_cliente: str = ""
    es_premium: bool = False
    subtotal: float = 0.0
    descuento: float = 0.0
    monto_igv: float = 0.0
    monto_total: float = 0.0