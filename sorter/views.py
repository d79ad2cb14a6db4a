import logging

from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt

from .forms import SortForm
from .utils.parsing import parse_integers
from .utils.sorting import sorted_copy

logger = logging.getLogger(__name__)

def get_sort_form(request):
    """Bind the sort form to POST data, falling back to the query string"""
    data = request.POST if request.method == 'POST' else request.GET
    return SortForm(data)

def sort_numbers(raw):
    """
    Parse raw input and Quick Sort a copy of it

    Args:
        raw: Delimited integer text as typed by the user

    Returns:
        (original, sorted) tuple. Both are None when raw is empty or only
        whitespace; both are lists otherwise, possibly empty.
    """
    original = parse_integers(raw)
    sorted_numbers = sorted_copy(original)

    if original is not None:
        logger.info(f"Sorted {len(original)} numbers from {len(raw)} characters of input")

    return original, sorted_numbers

def index(request):
    """Form page that shows the original and sorted sequences"""
    form = get_sort_form(request)
    raw = None
    original = None
    sorted_numbers = None

    if form.is_valid():
        raw = form.cleaned_data['numbers']
        original, sorted_numbers = sort_numbers(raw)
    else:
        logger.warning(f"Rejected sort input: {form.errors.as_text()}")
        for error in form.errors.get('numbers', []):
            messages.error(request, error)

    return render(request, 'sorter/index.html', {
        'form': form,
        'input': raw,
        'original': original,
        'sorted': sorted_numbers,
    })

def privacy(request):
    return render(request, 'sorter/privacy.html')

@csrf_exempt
def api_sort(request):
    """
    API endpoint that sorts numbers and returns JSON
    Accepts a `numbers` GET or POST parameter with delimited integers.
    Returns the raw input with the original and sorted lists, which are
    null when no input was given.
    """
    form = get_sort_form(request)

    if not form.is_valid():
        logger.warning(f"Rejected API sort input: {form.errors.as_text()}")
        return JsonResponse({'errors': form.errors.get_json_data()}, status=400)

    raw = form.cleaned_data['numbers']
    original, sorted_numbers = sort_numbers(raw)

    return JsonResponse({
        'input': raw,
        'original': original,
        'sorted': sorted_numbers,
    })
