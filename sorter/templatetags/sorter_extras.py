from django import template

register = template.Library()

@register.filter(name='join_numbers')
def join_numbers(numbers, separator=', '):
    """Render a list of integers as "2, 3, 4" in Django templates"""
    if numbers is None:
        return ''
    return separator.join(str(number) for number in numbers)
