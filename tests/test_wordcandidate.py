from kbdmodels.area import Area, Point, Rect, Size
from kbdmodels.wordcandidate import Source, WordCandidate


def test_default_candidate():
    candidate = WordCandidate()
    assert candidate.source is Source.UNKNOWN
    assert candidate.word == ""
    assert candidate.label == ""
    assert candidate.valid() is False


def test_label_equals_word_for_prediction():
    candidate = WordCandidate(Source.PREDICTION, "hello")
    assert candidate.label == "hello"
    assert candidate.word == "hello"


def test_user_source_label():
    candidate = WordCandidate(Source.USER, "hello")
    assert candidate.label == "Add 'hello' to user dictionary"
    assert candidate.word == "hello"


def test_valid_needs_size_and_label():
    candidate = WordCandidate(Source.SPELL_CHECKING, "word")
    assert candidate.valid() is False
    candidate.area = Area(size=Size(10, 20))
    assert candidate.valid() is True
    candidate.label = ""
    assert candidate.valid() is False


def test_rect_from_origin_and_size():
    candidate = WordCandidate(Source.PREDICTION, "w")
    candidate.origin = Point(3, 4)
    candidate.area = Area(size=Size(30, 40))
    assert candidate.rect() == Rect(3, 4, 30, 40)


def test_equality_ignores_word():
    a = WordCandidate(Source.PREDICTION, "same")
    b = WordCandidate(Source.PREDICTION, "same")
    assert a == b
    b.word = "other"
    assert a == b


def test_inequality_on_source_label_origin():
    a = WordCandidate(Source.PREDICTION, "x")
    assert a != WordCandidate(Source.SPELL_CHECKING, "x")
    assert a != WordCandidate(Source.PREDICTION, "y")
    moved = WordCandidate(Source.PREDICTION, "x")
    moved.origin = Point(1, 1)
    assert a != moved
    resized = WordCandidate(Source.PREDICTION, "x")
    resized.area = Area(size=Size(5, 5))
    assert a != resized