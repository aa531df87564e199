import base64
from dinehub.services.qr_service import qr_service

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def test_public_menu_url():
    assert qr_service.public_menu_url("https", "dine.example", "tasty-spoon") == "https://dine.example/menu/tasty-spoon"
    assert qr_service.public_menu_url("http", "localhost:8000", "bistro") == "http://localhost:8000/menu/bistro"


def test_generate_qr_png():
    png = qr_service.generate_qr("http://localhost/menu/bistro", size=200)
    assert png.startswith(PNG_SIGNATURE)


def test_data_uri_is_deterministic():
    first = qr_service.menu_qr_data_uri("http", "localhost", "bistro")
    second = qr_service.menu_qr_data_uri("http", "localhost", "bistro")
    other = qr_service.menu_qr_data_uri("http", "localhost", "diner")
    assert first == second
    assert first != other
    payload = first.split(",", 1)[1]
    assert base64.b64decode(payload).startswith(PNG_SIGNATURE)
