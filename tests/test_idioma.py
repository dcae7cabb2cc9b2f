import pytest

from courseshop.idioma import Idioma


@pytest.mark.parametrize("flag", ["1", "true", "Activo"])
def test_from_line_active_values(flag):
    idioma = Idioma.from_line(f"{flag},Espanol,ES.")
    assert idioma.activo is True
    assert idioma.idioma == "Espanol"
    assert idioma.seleccion == "ES"


@pytest.mark.parametrize("flag", ["0", "false", ""])
def test_from_line_inactive_values(flag):
    assert Idioma.from_line(f"{flag},Ingles,EN.").activo is False


def test_to_line_format():
    assert Idioma(True, "Espanol", "ES").to_line() == "1,Espanol,ES."
    assert Idioma(False, "Ingles", "EN").to_line() == "0,Ingles,EN."


def test_round_trip():
    original = Idioma(True, "Frances", "FR")
    assert Idioma.from_line(original.to_line()) == original


def test_activar_desactivar():
    idioma = Idioma(False, "Ingles", "EN")
    idioma.activar()
    assert idioma.activo is True
    idioma.desactivar()
    assert idioma.activo is False


def test_describir():
    assert Idioma(False, "Ingles", "EN").describir() == "Seleccionado: EN\nEstado: Nulo"
    assert Idioma(True, "Ingles", "EN").describir().endswith("Estado: Activo")


def test_guardar_overwrites(tmp_path):
    ruta = tmp_path / "Idioma" / "estado_idioma.txt"
    Idioma(True, "Espanol", "ES").guardar(ruta)
    Idioma(False, "Ingles", "EN").guardar(ruta)
    contenido = ruta.read_text(encoding="utf-8")
    assert contenido.splitlines() == ["0,Ingles,EN."]
    assert Idioma.from_line(contenido) == Idioma(False, "Ingles", "EN")