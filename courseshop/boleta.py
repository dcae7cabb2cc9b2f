"""Electronic receipts for purchased courses."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from pathlib import Path

from courseshop.detalle import DetalleBoleta, DetalleCurso

IGV_RATE = 0.18

_RULE = "\t\t" + "-" * 76
_BANNER = "=" * 68


class Boleta:
    """A receipt built from a header and the selected courses.

    The amounts are computed on construction.
    """

    def __init__(
        self,
        detalle: DetalleBoleta,
        cursos: Iterable[DetalleCurso] | None = None,
    ) -> None:
        self.detalle = dataclasses.replace(detalle)
        self.cursos: list[DetalleCurso] = list(cursos or ())
        self.generar()

    def _primer_invalido(self) -> DetalleCurso | None:
        return next(
            (c for c in self.cursos if c.precio < 0 or c.cantidad <= 0),
            None,
        )

    def validar_datos(self) -> bool:
        """True when every course has a non-negative price and a positive quantity."""
        return self._primer_invalido() is None

    def subtotal_cursos(self) -> float:
        """Sum of all line totals."""
        return sum((curso.total() for curso in self.cursos), 0.0)

    def generar(self) -> None:
        """Compute subtotal, tax and total; raise ValueError on invalid course data."""
        invalido = self._primer_invalido()
        if invalido is not None:
            raise ValueError(f"Curso con datos inválidos: {invalido.nombre}")
        subtotal = self.subtotal_cursos()
        igv = subtotal * IGV_RATE
        # No discount is applied to the total, premium or not.
        descuento = 0.0
        self.detalle.subtotal = subtotal
        self.detalle.monto_igv = igv
        self.detalle.descuento = descuento
        self.detalle.monto_total = subtotal + igv - descuento

    def render(self) -> str:
        """The printable receipt text."""
        d = self.detalle
        lines = [
            "",
            "\t\t\t\tCOURSERA APRENDIZAJE PARA TODOS  ",
            _RULE,
            "\t\tBOLETA ELECTRONICA",
            _RULE,
            "",
            f"\t\tID TRANSACCION: {d.num_operacion}",
            f"\t\tFecha de Emision: {d.fecha}\tHora: {d.hora}",
            f"\t\tNombre Titular: {d.nombre_cliente}",
            f"\t\tCorreo Titular: {d.correo}",
            f"\t\tMetodo de Pago: {d.metodo_pago}",
            _RULE,
            "\t\tCURSOS ADQUIRIDOS",
            _RULE,
            "\t\tCurso\t\tCantidad\tCategoria\tP. Unitario\tP. total\t",
        ]
        lines.extend(
            f"\t\t{c.nombre}\t\t{c.cantidad}\t\t{c.categoria}"
            f"\t${c.precio:.2f}\t\t${c.total():.2f}"
            for c in self.cursos
        )
        lines.extend(
            [
                _RULE,
                "\t\tRESUMEN DE PAGO\t",
                _RULE,
                f"\t\tSubtotal:    \t{d.subtotal:.2f}",
                f"\t\tDescuentos:  \t{d.descuento:.2f}",
                f"\t\tIGV (18%):   \t{d.monto_igv:.2f}",
                f"\t\tMonto Total: \t{d.monto_total:.2f}",
                _RULE,
            ]
        )
        return "\n".join(lines) + "\n"

    def nombre_archivo(self) -> Path:
        """Default file path for this receipt, derived from the client's name."""
        nombre = self.detalle.nombre_cliente.replace(" ", "_")
        return Path("ListaBoleta") / "boletaCursos" / f"boleta_{nombre}.txt"

    def guardar(self, ruta: str | Path) -> Path:
        """Append the receipt to the file at ``ruta``, creating directories as needed."""
        path = Path(ruta)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as archivo:
            archivo.write(f"\n\n{_BANNER}\n")
            archivo.write("                       NUEVA BOLETA\n")
            archivo.write(f"{_BANNER}\n")
            archivo.write(self.render())
        return path