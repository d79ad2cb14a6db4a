from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings


def run_quicksort(*args, stdin=''):
    out = StringIO()
    call_command('quicksort', *args, stdin=StringIO(stdin), stdout=out)
    return out.getvalue()


class TestQuicksortCommand:

    def test_sorts_arguments(self):
        output = run_quicksort('5,3,8,4,2')

        assert 'Original: 5, 3, 8, 4, 2' in output
        assert 'Sorted: 2, 3, 4, 5, 8' in output

    def test_joins_multiple_arguments(self):
        output = run_quicksort('3', '1', '2,-7')

        assert 'Original: 3, 1, 2, -7' in output
        assert 'Sorted: -7, 1, 2, 3' in output

    def test_reads_stdin_without_arguments(self):
        output = run_quicksort(stdin='9\n8\n7\n')

        assert 'Sorted: 7, 8, 9' in output

    def test_no_input(self):
        assert 'No input provided.' in run_quicksort(stdin='  \n')

    def test_no_valid_integers(self):
        assert 'No valid integers found.' in run_quicksort('a,b;;')

    @override_settings(QUICKSORT_MAX_INPUT_LENGTH=4)
    def test_too_long_input_raises(self):
        with pytest.raises(CommandError, match='too long'):
            run_quicksort('1,2,3,4')

    def test_interactive_stdin_is_not_read(self):
        out = StringIO()
        call_command('quicksort', stdin=TerminalStdin(), stdout=out)

        assert 'No input provided.' in out.getvalue()

    def test_null_character_token_dropped(self):
        assert 'Sorted: 3, 5' in run_quicksort('5,\x00,3')


class TerminalStdin:
    """Stands in for an interactive terminal; reading it would block."""

    def isatty(self):
        return True

    def read(self):
        raise AssertionError('stdin should not be read from a terminal')
