import logging

from click.testing import CliRunner

from charlm.cli import main

CORPUS = "the cat sat on the mat and the rat ate the hat. " * 5


def _corpus(tmp_path, text=CORPUS):
    path = tmp_path / 'corpus.txt'
    path.write_text(text, encoding='utf-8')
    return str(path)


def test_fixed_mode_is_reproducible(tmp_path):
    runner = CliRunner()
    corpus = _corpus(tmp_path)

    first = runner.invoke(main, ['3', 'the', '100', 'fixed', corpus])
    second = runner.invoke(main, ['3', 'the', '100', 'fixed', corpus])

    assert first.exit_code == 0, first.output
    assert first.output == second.output
    assert first.output.startswith('the')
    assert first.output.endswith('\n')


def test_output_is_only_the_generated_text(tmp_path):
    result = CliRunner().invoke(main, ['2', 'ab', '10', 'fixed', _corpus(tmp_path, 'abcd')])
    assert result.exit_code == 0, result.output
    assert result.output == "abcd\n"


def test_random_mode_runs(tmp_path):
    result = CliRunner().invoke(main, ['1', 'a', '20', 'random', _corpus(tmp_path, 'aaaa')])
    assert result.exit_code == 0, result.output
    assert result.output == "a" * 21 + "\n"


def test_short_initial_text(tmp_path):
    result = CliRunner().invoke(main, ['5', 'the', '10', 'fixed', _corpus(tmp_path)])
    assert result.exit_code == 0, result.output
    assert result.output == "the\n"


def test_show_model(tmp_path):
    result = CliRunner().invoke(main, ['3', 'abc', '0', 'fixed', '--show-model', _corpus(tmp_path, 'abcabcabc')])
    assert result.exit_code == 0, result.output
    assert result.output == "abc : (a 2 1.0 1.0)\nbca : (b 2 1.0 1.0)\ncab : (c 2 1.0 1.0)\n"


def test_non_numeric_window_length(tmp_path):
    result = CliRunner().invoke(main, ['three', 'the', '10', 'fixed', _corpus(tmp_path)])
    assert result.exit_code == 2


def test_zero_window_length(tmp_path):
    result = CliRunner().invoke(main, ['0', 'the', '10', 'fixed', _corpus(tmp_path)])
    assert result.exit_code == 2


def test_missing_corpus(tmp_path):
    result = CliRunner().invoke(main, ['3', 'the', '10', 'fixed', str(tmp_path / 'missing.txt')])
    assert result.exit_code == 2


def test_verbose_logs_stay_off_stdout(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    result = CliRunner().invoke(main, ['2', 'ab', '10', 'fixed', '-v', _corpus(tmp_path, 'abcd')])

    assert result.exit_code == 0, result.output
    assert result.stdout == "abcd\n"
    assert "Trained on 4 characters" in caplog.text
