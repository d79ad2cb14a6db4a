import sys

from django.core.management.base import BaseCommand, CommandError

from sorter.forms import SortForm
from sorter.templatetags.sorter_extras import join_numbers
from sorter.views import sort_numbers

class Command(BaseCommand):
    stealth_options = ('stdin',)
    help = 'Quick Sort a delimited list of integers and print the original and sorted sequences'

    def add_arguments(self, parser):
        parser.add_argument(
            'numbers',
            nargs='*',
            help='Numbers separated by commas, spaces or semicolons. Read from stdin when omitted.'
        )

    def handle(self, *args, **options):
        if options['numbers']:
            raw = ' '.join(options['numbers'])
        else:
            raw = self.read_stdin(options.get('stdin') or sys.stdin)

        form = SortForm({'numbers': raw})
        if not form.is_valid():
            raise CommandError(' '.join(form.errors.get('numbers', [])))

        original, sorted_numbers = sort_numbers(form.cleaned_data['numbers'])

        if original is None:
            self.stdout.write(self.style.WARNING('No input provided.'))
        elif not original:
            self.stdout.write(self.style.WARNING('No valid integers found.'))
        else:
            self.stdout.write(f"Original: {join_numbers(original)}")
            self.stdout.write(self.style.SUCCESS(f"Sorted: {join_numbers(sorted_numbers)}"))

    def read_stdin(self, stdin):
        if stdin.isatty():
            return ''
        return stdin.read()
