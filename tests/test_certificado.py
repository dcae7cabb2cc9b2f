from courseshop.certificado import Certificado


def test_default_inactive():
    assert Certificado().estado is False


def test_activar_desactivar():
    cert = Certificado()
    cert.activar()
    assert cert.estado is True
    cert.desactivar()
    assert cert.estado is False


def test_describir():
    assert Certificado(True).describir() == "Estado del Certificado: Disponible"
    assert Certificado(False).describir() == "Estado del Certificado: No Disponible"


def test_guardar_writes_status_text(tmp_path):
    ruta = Certificado(True).guardar("ana", base_dir=tmp_path)
    assert ruta.read_text(encoding="utf-8") == "Activo"
    ruta = Certificado(False).guardar("ana", base_dir=tmp_path)
    assert ruta.read_text(encoding="utf-8") == "Inactivo"


def test_round_trip_without_course(tmp_path):
    Certificado(True).guardar("ana", base_dir=tmp_path)
    assert Certificado.cargar("ana", base_dir=tmp_path) == Certificado(True)


def test_round_trip_with_course(tmp_path):
    Certificado(True).guardar("ana", "python", tmp_path)
    Certificado(False).guardar("ana", "sql", tmp_path)
    assert Certificado.cargar("ana", "python", tmp_path).estado is True
    assert Certificado.cargar("ana", "sql", tmp_path).estado is False


def test_course_files_are_distinct(tmp_path):
    a = Certificado(True).guardar("ana", "python", tmp_path)
    b = Certificado(True).guardar("ana", base_dir=tmp_path)
    assert a != b
    assert a.exists() and b.exists()


def test_missing_file_yields_inactive(tmp_path):
    assert Certificado.cargar("nadie", "curso", tmp_path) == Certificado(False)


def test_cargar_accepts_true_and_one(tmp_path):
    ruta = Certificado().guardar("bob", base_dir=tmp_path)
    for valor, esperado in [("true", True), ("1", True), ("no", False)]:
        ruta.write_text(valor + "\nresto", encoding="utf-8")
        assert Certificado.cargar("bob", base_dir=tmp_path).estado is esperado


def test_empty_file_yields_inactive(tmp_path):
    ruta = Certificado(True).guardar("eva", base_dir=tmp_path)
    ruta.write_text("", encoding="utf-8")
    assert Certificado.cargar("eva", base_dir=tmp_path).estado is False