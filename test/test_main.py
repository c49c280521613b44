import pytest

from varbyte.__main__ import cmd_pack, main


# -----------------------------------------------------------------------------

@pytest.fixture()
def values(tmp_path):
    path = tmp_path / 'values.txt'
    path.write_text('\n'.join(str(x) for x in range(143)) + '\n')
    return path


# -----------------------------------------------------------------------------

def test_cmd_pack(values, tmp_path, capsys):
    out = tmp_path / 'out.bin'

    assert cmd_pack(values, out, 7, 8) == (143, 126, 7)
    assert len(out.read_bytes()) == 126
    assert "Packed 143 values into 126 bytes (7 padding bits)" in \
        capsys.readouterr().out


def test_main_pack(tmp_path):
    path = tmp_path / 'values.txt'
    path.write_text('0x3F 0x1AFF\n0x7\n')
    out = tmp_path / 'out.bin'

    main(['pack', str(path), str(out), '-n', '13'])

    # Every value is written with 13 bits.
    assert out.read_bytes() == bytes([0x3F, 0xE0, 0x5F, 0x1F, 0x00])


def test_main_empty_input(tmp_path):
    path = tmp_path / 'values.txt'
    path.write_text('')
    out = tmp_path / 'out.bin'

    main(['pack', str(path), str(out), '-n', '5'])

    assert out.read_bytes() == b''


def test_main_value_too_wide(tmp_path, capsys):
    path = tmp_path / 'values.txt'
    path.write_text('256\n')

    with pytest.raises(SystemExit) as e:
        main(['pack', str(path), str(tmp_path / 'out.bin'), '-n', '8'])

    assert e.value.code == 1
    assert "256" in capsys.readouterr().err


def test_main_bits_exceed_width(tmp_path):
    path = tmp_path / 'values.txt'
    path.write_text('1\n')

    with pytest.raises(SystemExit) as e:
        main([
            'pack', str(path), str(tmp_path / 'out.bin'),
            '-n', '12', '-w', '8'
        ])

    assert e.value.code == 2


def test_main_bad_integer(tmp_path):
    path = tmp_path / 'values.txt'
    path.write_text('12 abc\n')

    with pytest.raises(SystemExit) as e:
        main(['pack', str(path), str(tmp_path / 'out.bin'), '-n', '8'])

    assert e.value.code == 1


def test_main_missing_input(tmp_path, capsys):
    path = tmp_path / 'missing.txt'

    with pytest.raises(SystemExit) as e:
        main(['pack', str(path), str(tmp_path / 'out.bin'), '-n', '8'])

    assert e.value.code == 1
    assert "missing.txt" in capsys.readouterr().err


def test_main_unwritable_output(tmp_path):
    path = tmp_path / 'values.txt'
    path.write_text('1\n')

    with pytest.raises(SystemExit) as e:
        main([
            'pack', str(path), str(tmp_path / 'nope' / 'out.bin'),
            '-n', '8'
        ])

    assert e.value.code == 1
