# courseshop

A small library for selling online courses. It provides:

- `courseshop.detalle`: course line items (`DetalleCurso`, with `total()`) and receipt header data (`DetalleBoleta`). Both are dataclasses.
- `courseshop.boleta`: receipts (`Boleta`). A receipt computes the subtotal, 18% IGV tax and total. It renders as text and can be appended to a file.
- `courseshop.carrito`: a generic shopping cart (`Carrito`).
- `courseshop.cliente` and `courseshop.usuario`: client and user records (`Cliente`, `Usuario`). Both read and write comma-separated lines that end in a period.
- `courseshop.premium`, `courseshop.certificado` and `courseshop.idioma`: premium status (`Premium`), certificate availability (`Certificado`) and language selection (`Idioma`). Each one is stored as a small text file.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Receipts

```python
from courseshop.detalle import DetalleCurso, DetalleBoleta
from courseshop.boleta import Boleta
from courseshop.carrito import Carrito

carrito = Carrito()
carrito.agregar(DetalleCurso("PY01", "Python", "Software", 50.0, 2))
carrito.agregar(DetalleCurso("DS02", "Datos", "Ciencia", 30.0, 1))
print(len(carrito))  # 2

detalle = DetalleBoleta(
    num_operacion="0001",
    fecha="01/01/2025",
    hora="10:00",
    metodo_pago="Tarjeta",
    correo="ana@example.com",
    nombre_cliente="Ana Perez",
)
boleta = Boleta(detalle, list(carrito))
print(boleta.subtotal_cursos())      # 130.0
print(boleta.detalle.monto_total)    # subtotal plus 18% IGV
print(boleta.render())
boleta.guardar(boleta.nombre_archivo())
```

`Boleta` works on a copy of the `DetalleBoleta` it is given and fills in `subtotal`, `monto_igv`, `descuento` and `monto_total` when it is built. No discount is applied, so `descuento` is always `0.0`, whether or not `es_premium` is set. A course with a negative price or a quantity below one makes `Boleta(...)` and `generar()` raise `ValueError`. `validar_datos()` reports the same check as a boolean.

`nombre_archivo()` returns `ListaBoleta/boletaCursos/boleta_<client name>.txt`, with spaces in the name replaced by underscores. `guardar(ruta)` creates any missing directories. It then appends a "NUEVA BOLETA" banner and the rendered receipt to the file, and returns the path.

## Cart

`Carrito` keeps items in order and supports `len()` and iteration. `agregar(item)` adds an item. `eliminar(item)` removes the first equal item and does nothing if there is none. `vaciar()` removes all items. `mostrar(out=None)` prints each item on its own line to `out`, or to standard output if `out` is not given.

## Clients and users

```python
from courseshop.usuario import Usuario

usuario = Usuario.from_line(
    "Ana,Ingeniera,0000,ana@example.com,ana,password,Activo.",
    base_dir="datos",
)
print(usuario.serializar())
print(usuario.describir())
```

- `Cliente(nombre, profesion, telefono, correo, archivo=None)`: when `archivo` is given, the record is appended to that file when the client is created and again after every change to a field. `to_line()` and `Cliente.from_line(linea, archivo=None)` write and read the record line.
- `Usuario(cliente, usuario="", contra="", base_dir=".")` is a `Premium` with a client and credentials. `Usuario.from_line` does three things: it records the client in `<base_dir>/Clientes/cliente.txt`, sets the premium status from the last field (`Activo`, `true` or `1` mean active), and stores that status.
- `activar()` and `desactivar()` store the status in `<base_dir>/ListaUsuario/Premium/premium_<client e-mail>.txt`. `cargar_estado_premium()` reads the file named after the user name, not the e-mail, and returns the status.
- `cursos_adquiridos()` returns the lines of `<base_dir>/ListaUsuario/Compras/Curso_adquirido.txt`. It raises `FileNotFoundError` if that file is missing.

## Status files

- `Premium.guardar(nombre_usuario, base_dir=".")` and `Premium.cargar(...)` use `ListaUsuario/Premium/premium_<name>.txt`. When loading, only `Activo` counts as active, and a missing file gives an inactive status. `Premium.from_line` also accepts `true` and `1`.
- `Certificado.guardar(nombre_usuario, curso="", base_dir=".")` and `Certificado.cargar(...)` use `ListaCurso/Certificado/<name>_<course>.txt`, or `<name>.txt` when no course is given. `Activo`, `true` and `1` mean available, and a missing or empty file gives an unavailable certificate.
- `Idioma.guardar(ruta="Idioma/estado_idioma.txt")` overwrites the file with the line from `to_line()`. `Idioma.from_line` reads that line back.

## What it does not do

courseshop is a library only. It has no command-line program or interactive menu, no course catalogue, and it does not process payments. Records are kept as plain text files in the directories described above. There is no database.