import pytest

VALID_TEXT = "100,NEM12\n200,1234567890,KWH\n300,20250101,10.5,A\n300,20250102,5,E\n900\n"


@pytest.fixture
def valid_text():
    return VALID_TEXT


@pytest.fixture
def valid_lines():
    return VALID_TEXT.splitlines()


@pytest.fixture
def two_meter_lines():
    return [
        "100,NEM12",
        "200,6123456789,KWH",
        "300,20250101,-1.25,A",
        "300,20250102,3.005,E",
        "300,20250103,0.1,A",
        "200,6987654321,kwh",
        "300,20250101,0.2,A",
        "300,20250102,-0.3,E",
        "900",
    ]


@pytest.fixture
def write_nem12(tmp_path):
    def _write(content, name="input.csv", encoding="utf-8"):
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path

    return _write
