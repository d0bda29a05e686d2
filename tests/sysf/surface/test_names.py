import pytest

from sysf.surface.names import NameSupply, generate_name, term_var_name, type_var_name


@pytest.mark.parametrize(
    "n, expected",
    [(0, "a"), (1, "b"), (25, "z"), (26, "aa"), (27, "ab"), (52, "ba"), (701, "zz"), (702, "aaa")],
)
def test_generate_name_is_bijective_base_26(n, expected) -> None:
    assert generate_name(n) == expected


def test_type_names_are_uppercase() -> None:
    assert type_var_name(0) == "A"
    assert type_var_name(26) == "AA"
    assert term_var_name(26) == "aa"


def test_negative_id_rejected() -> None:
    with pytest.raises(ValueError):
        generate_name(-1)


def test_supply_counters_are_independent() -> None:
    names = NameSupply()

    assert names.fresh_type() == "A"
    assert names.fresh_term() == "a"
    assert names.fresh_type() == "B"
    assert names.fresh_term() == "b"


def test_supply_skips_taken_names() -> None:
    names = NameSupply(taken_types=frozenset({"A"}), taken_terms=frozenset({"a", "c"}))

    assert names.fresh_type() == "B"
    assert names.fresh_term() == "b"
    assert names.fresh_term() == "d"
