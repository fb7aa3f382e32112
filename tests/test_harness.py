from nem12lite.harness import main


def test_sample_totals(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Total volume for NMI 6123456789 is -36.84" in out
    assert "Total volume for NMI 6987654321 is 14.33" in out


def test_file_argument(write_nem12, valid_text, capsys):
    assert main([str(write_nem12(valid_text))]) == 0
    assert "NMI 1234567890 is 15.5" in capsys.readouterr().out


def test_invalid_file_exits_nonzero(write_nem12, capsys):
    path = write_nem12("100,NEM12\n200,123,KWH\n900\n")
    assert main([str(path)]) == 1
    assert "Invalid NMI" in capsys.readouterr().err
