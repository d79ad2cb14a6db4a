"""Quick Sort implementation for integer sequences"""

def quick_sort(numbers):
    """
    Sort a list of integers in place using Quick Sort (Lomuto partition)

    Best and average case O(n log n). Worst case O(n^2), hit when the last
    element of every segment is its minimum or maximum, e.g. already sorted
    or reverse-sorted input. The sort is not stable.

    Args:
        numbers: List of integers to sort, or None

    Returns:
        None, the list is reordered in place
    """
    if numbers is None or len(numbers) < 2:
        return

    _quick_sort(numbers, 0, len(numbers) - 1)

def _quick_sort(numbers, low, high):
    """
    Sort numbers[low..high] in place

    Recurses into the smaller partition and loops over the larger one, so
    the stack depth stays O(log n) even on worst-case input.
    """
    while low < high:
        pivot_index = partition(numbers, low, high)

        if pivot_index - low < high - pivot_index:
            _quick_sort(numbers, low, pivot_index - 1)
            low = pivot_index + 1
        else:
            _quick_sort(numbers, pivot_index + 1, high)
            high = pivot_index - 1

def partition(numbers, low, high):
    """
    Lomuto partition of numbers[low..high] around numbers[high]

    Args:
        numbers: List being sorted
        low: First index of the segment
        high: Last index of the segment, holds the pivot

    Returns:
        Final index of the pivot
    """
    pivot = numbers[high]
    i = low

    for j in range(low, high):
        if numbers[j] < pivot:
            numbers[i], numbers[j] = numbers[j], numbers[i]
            i += 1

    # Place pivot between the smaller and larger elements
    numbers[i], numbers[high] = numbers[high], numbers[i]
    return i

def sorted_copy(numbers):
    """
    Return a Quick Sorted copy of numbers, leaving the original untouched

    Returns None when numbers is None so absent input stays absent.
    """
    if numbers is None:
        return None

    result = list(numbers)
    quick_sort(result)
    return result
