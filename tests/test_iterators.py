import pytest

from rustdrills.solutions.iterators import (
    DivideByZeroError,
    DivisionError,
    NotDivisibleError,
    Progress,
    capitalize_first,
    capitalize_words_string,
    capitalize_words_vector,
    count_collection_for,
    count_collection_iterator,
    count_for,
    count_iterator,
    divide,
    factorial,
    list_of_results,
    result_with_list,
)


def get_map():
    return {
        "variables1": Progress.COMPLETE,
        "functions1": Progress.COMPLETE,
        "hashmap1": Progress.COMPLETE,
        "arc1": Progress.SOME,
        "as_ref_mut": Progress.NONE,
        "from_str": Progress.NONE,
    }


def get_vec_map():
    other = {
        "variables2": Progress.COMPLETE,
        "functions2": Progress.COMPLETE,
        "if1": Progress.COMPLETE,
        "from_into": Progress.NONE,
        "try_from_into": Progress.NONE,
    }
    return [get_map(), other]


def test_capitalize_success():
    assert capitalize_first("hello") == "Hello"


def test_capitalize_empty():
    assert capitalize_first("") == ""


def test_iterate_string_vec():
    assert capitalize_words_vector(["hello", "world"]) == ["Hello", "World"]


def test_iterate_into_string():
    assert capitalize_words_string(["hello", " ", "world"]) == "Hello World"


def test_divide_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert info.value == NotDivisibleError(dividend=81, divisor=6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZeroError):
        divide(81, 0)


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_divide_negative_truncates_exactly():
    assert divide(-81, 9) == -9
    with pytest.raises(NotDivisibleError):
        divide(-7, 2)


def test_division_errors_share_a_base():
    with pytest.raises(DivisionError):
        divide(1, 0)


def test_result_with_list():
    assert result_with_list() == [1, 11, 1426, 3]


def test_list_of_results():
    assert list_of_results() == [1, 11, 1426, 3]


def test_factorial_of_0():
    assert factorial(0) == 1


def test_factorial_of_1():
    assert factorial(1) == 1


def test_factorial_of_2():
    assert factorial(2) == 2


def test_factorial_of_4():
    assert factorial(4) == 24


def test_factorial_overflow():
    assert factorial(20) == 2432902008176640000
    with pytest.raises(OverflowError):
        factorial(21)


def test_count_complete():
    assert count_iterator(get_map(), Progress.COMPLETE) == 3


def test_count_equals_for():
    mapping = get_map()
    assert count_for(mapping, Progress.COMPLETE) == count_iterator(
        mapping, Progress.COMPLETE
    )


def test_count_collection_complete():
    assert count_collection_iterator(get_vec_map(), Progress.COMPLETE) == 6


def test_count_collection_equals_for():
    collection = get_vec_map()
    assert count_collection_for(
        collection, Progress.COMPLETE
    ) == count_collection_iterator(collection, Progress.COMPLETE)


def test_count_other_progress_values():
    assert count_iterator(get_map(), Progress.SOME) == 1
    assert count_collection_iterator(get_vec_map(), Progress.NONE) == 4