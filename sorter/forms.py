from django import forms
from django.conf import settings
from django.core.validators import ProhibitNullCharactersValidator

DEFAULT_MAX_INPUT_LENGTH = 20000

class SortForm(forms.Form):
    numbers = forms.CharField(
        required=False,
        strip=False,
        widget=forms.Textarea(attrs={
            'class': 'form-control',
            'rows': 4,
            'placeholder': 'Enter numbers separated by commas, spaces, semicolons or new lines (e.g., 5, 3, 8, 4, 2)'
        })
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Stray characters are dropped by the parser, not rejected here
        self.fields['numbers'].validators = [
            validator for validator in self.fields['numbers'].validators
            if not isinstance(validator, ProhibitNullCharactersValidator)
        ]

    def clean_numbers(self):
        numbers = self.cleaned_data.get('numbers', '')
        max_length = getattr(settings, 'QUICKSORT_MAX_INPUT_LENGTH', DEFAULT_MAX_INPUT_LENGTH)
        if max_length and len(numbers) > max_length:
            raise forms.ValidationError(
                f"Input is too long ({len(numbers)} characters). The limit is {max_length}."
            )
        return numbers
