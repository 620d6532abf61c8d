import pytest

from linkrisk.similarity import edit_distance


@pytest.mark.parametrize("a,b,expected", [
    ("kitten", "sitting", 3),
    ("go0gle", "google", 1),
    ("paypa1", "paypal", 1),
    ("flaw", "lawn", 2),
    ("abc", "abc", 0),
    ("", "abc", 3),
    ("abc", "", 3),
    ("", "", 0),
])
def test_edit_distance_known_values(a, b, expected):
    assert edit_distance(a, b) == expected


def test_edit_distance_identity_and_symmetry():
    words = ["google", "g00gle", "microsoft", "micr0soft.com", "", "a"]
    for a in words:
        assert edit_distance(a, a) == 0
        for b in words:
            assert edit_distance(a, b) == edit_distance(b, a)


def test_edit_distance_bounded_by_longer_length():
    assert edit_distance("amazon", "netflix") <= max(len("amazon"), len("netflix"))
