class InvalidOptionValue(Exception):
    pass


def check_option(name, value, options, ignore_list=[]):
    """
    Checks that an option has a valid value, raising :class:`InvalidOptionValue` otherwise.

    :param name: The name of the option to check.
    :param value: The value of the option.
    :param options: List of valid option values.
    :param ignore_list: Do not raise an error if value is in this list.

    .. rubric:: Example

    .. code-block::

        def build(heap_type):
            check_option('heap_type', heap_type, ['min', 'max'])
            ...

    """
    if value not in options and value not in ignore_list:
        raise InvalidOptionValue(
            f"Invalid option value {name}={value}. Use one of {options}."
        )
    return value
