import pytest

from matrixcalc import cli
from matrixcalc.utils.sparse_matrix import load


@pytest.fixture
def matrix_files(tmp_path):
    a = tmp_path / 'a.txt'
    b = tmp_path / 'b.txt'
    a.write_text("rows=2\ncols=2\n(0, 0, 1)\n(1, 1, 2)\n", encoding='utf-8')
    b.write_text("rows=2\ncols=2\n(0, 0, 3)\n(0, 1, 4)\n", encoding='utf-8')
    return a, b


def feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr('builtins.input', lambda prompt='': next(answers))


def test_multiply_session(monkeypatch, capsys, tmp_path, matrix_files):
    """A full session writes the product to the result file"""
    a, b = matrix_files
    output = tmp_path / 'result.txt'
    feed_input(monkeypatch, ['3', str(a), f'  {b}  '])

    assert cli.run(output_file=str(output)) == 0
    assert load(output).elements == {(0, 0): 3, (0, 1): 4}
    assert 'result saved to' in capsys.readouterr().out


def test_result_file_from_environment(monkeypatch, tmp_path, matrix_files):
    a, b = matrix_files
    output = tmp_path / 'env_result.txt'
    monkeypatch.setenv('MATRIX_RESULT_FILE', str(output))
    feed_input(monkeypatch, ['1', str(a), str(b)])

    assert cli.run() == 0
    assert load(output).elements == {(0, 0): 4, (0, 1): 4, (1, 1): 2}


def test_invalid_choice(monkeypatch, capsys):
    feed_input(monkeypatch, ['7'])

    assert cli.run() == 1
    assert 'Invalid choice' in capsys.readouterr().err


def test_malformed_input_reports_error(monkeypatch, capsys, tmp_path, matrix_files):
    a, _ = matrix_files
    bad = tmp_path / 'bad.txt'
    bad.write_text("foo\n", encoding='utf-8')
    output = tmp_path / 'result.txt'
    feed_input(monkeypatch, ['2', str(a), str(bad)])

    assert cli.run(output_file=str(output)) == 1
    assert capsys.readouterr().err.startswith('Error:')
    assert not output.exists()


def test_missing_input_file(monkeypatch, capsys, tmp_path, matrix_files):
    a, _ = matrix_files
    feed_input(monkeypatch, ['1', str(a), str(tmp_path / 'missing.txt')])

    assert cli.run(output_file=str(tmp_path / 'result.txt')) == 1
    assert 'Error:' in capsys.readouterr().err


def test_non_utf8_input_reports_error(monkeypatch, capsys, tmp_path, matrix_files):
    a, _ = matrix_files
    binary = tmp_path / 'binary.txt'
    binary.write_bytes(b"rows=1\ncols=1\n(0, 0, \xff)\n")
    output = tmp_path / 'result.txt'
    feed_input(monkeypatch, ['1', str(a), str(binary)])

    assert cli.run(output_file=str(output)) == 1
    assert 'not UTF-8' in capsys.readouterr().err
    assert not output.exists()
