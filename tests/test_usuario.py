import pytest

from courseshop.cliente import Cliente
from courseshop.premium import Premium
from courseshop.usuario import Usuario


def _cuenta(base_dir):
    cliente = Cliente("Ana", "Dev", "1", "ana@example.com")
    return Usuario(cliente, "ana", "secret", base_dir)


def test_serializar_format(tmp_path):
    cuenta = _cuenta(tmp_path)
    assert cuenta.serializar() == "Ana,Dev,1,ana@example.com,ana,secret,Inactivo."


def test_from_line_round_trip(tmp_path):
    cuenta = _cuenta(tmp_path)
    cuenta.activar()
    copia = Usuario.from_line(cuenta.serializar(), tmp_path)
    assert copia == cuenta
    assert copia.estado is True
    assert copia.cliente.correo == "ana@example.com"


def test_from_line_stores_premium_under_email(tmp_path):
    Usuario.from_line("Ana,Dev,1,ana@example.com,ana,secret,1.", tmp_path)
    assert Premium.cargar("ana@example.com", tmp_path).estado is True


def test_from_line_inactive(tmp_path):
    cuenta = Usuario.from_line("Ana,Dev,1,ana@example.com,ana,secret,Inactivo.", tmp_path)
    assert cuenta.estado is False
    assert cuenta.usuario == "ana"


def test_from_line_records_client(tmp_path):
    cuenta = Usuario.from_line("Ana,Dev,1,ana@example.com,ana,secret,Activo.", tmp_path)
    registro = tmp_path / "Clientes" / "cliente.txt"
    assert registro.read_text(encoding="utf-8").splitlines() == [cuenta.cliente.to_line()]


def test_activar_desactivar_persist(tmp_path):
    cuenta = _cuenta(tmp_path)
    cuenta.activar()
    assert Premium.cargar("ana@example.com", tmp_path).estado is True
    cuenta.desactivar()
    assert Premium.cargar("ana@example.com", tmp_path).estado is False
    assert cuenta.estado is False


def test_cargar_estado_premium_reads_by_user_name(tmp_path):
    Premium(True).guardar("ana", tmp_path)
    cuenta = _cuenta(tmp_path)
    assert cuenta.cargar_estado_premium() is True
    assert cuenta.estado is True


def test_cargar_estado_premium_missing_is_inactive(tmp_path):
    cuenta = _cuenta(tmp_path)
    assert cuenta.cargar_estado_premium() is False


def test_cursos_adquiridos(tmp_path):
    path = tmp_path / "ListaUsuario" / "Compras" / "Curso_adquirido.txt"
    path.parent.mkdir(parents=True)
    path.write_text("Python\nSQL\n", encoding="utf-8")
    assert _cuenta(tmp_path).cursos_adquiridos() == ["Python", "SQL"]


def test_cursos_adquiridos_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        _cuenta(tmp_path).cursos_adquiridos()


def test_describir(tmp_path):
    cuenta = _cuenta(tmp_path)
    lineas = cuenta.describir().splitlines()
    assert "\t--- Datos del Usuario ---" in lineas
    assert "Usuario: ana" in lineas
    assert lineas[-1] == "Estado Premium: Inactivo"


def test_equality_depends_on_fields(tmp_path):
    a = _cuenta(tmp_path)
    b = _cuenta(tmp_path)
    assert a == b
    b.usuario = "otra"
    assert not (a == b)