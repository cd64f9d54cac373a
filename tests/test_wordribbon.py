from kbdmodels.area import Area, Point, Rect, Size
from kbdmodels.wordcandidate import Source, WordCandidate
from kbdmodels.wordribbon import WordRibbon


def _words(ribbon):
    return [ribbon.data(row, WordRibbon.WORD_ROLE) for row in range(ribbon.row_count())]


def test_new_ribbon_is_empty_disabled_and_invalid():
    ribbon = WordRibbon()
    assert ribbon.row_count() == 0
    assert ribbon.enabled is False
    assert ribbon.valid() is False


def test_role_names_maps_word_role():
    ribbon = WordRibbon()
    assert ribbon.role_names() == {WordRibbon.WORD_ROLE: b"word"}
    assert WordRibbon.WORD_ROLE == 257


def test_append_candidate_emits_rows_inserted():
    ribbon = WordRibbon()
    inserted = []
    ribbon.rows_inserted.connect(lambda first, last: inserted.append((first, last)))
    ribbon.append_candidate(WordCandidate(Source.PREDICTION, "hello"))
    ribbon.append_candidate(WordCandidate(Source.PREDICTION, "help"))
    assert inserted == [(0, 0), (1, 1)]
    assert _words(ribbon) == ["hello", "help"]


def test_data_out_of_range_or_unknown_role_is_none():
    ribbon = WordRibbon()
    ribbon.append_candidate(WordCandidate(Source.PREDICTION, "a"))
    assert ribbon.data(-1, WordRibbon.WORD_ROLE) is None
    assert ribbon.data(1, WordRibbon.WORD_ROLE) is None
    assert ribbon.data(0, WordRibbon.WORD_ROLE + 5) is None


def test_clear_candidates_resets_model():
    ribbon = WordRibbon()
    resets = []
    ribbon.model_reset.connect(lambda: resets.append(True))
    ribbon.append_candidate(WordCandidate(Source.PREDICTION, "a"))
    ribbon.clear_candidates()
    assert ribbon.row_count() == 0
    assert resets == [True]


def test_candidates_returns_copy():
    ribbon = WordRibbon()
    ribbon.append_candidate(WordCandidate(Source.PREDICTION, "a"))
    copy = ribbon.candidates
    copy.clear()
    assert ribbon.row_count() == 1


def test_word_candidates_changed_replaces_all():
    ribbon = WordRibbon()
    ribbon.append_candidate(WordCandidate(Source.PREDICTION, "old"))
    ribbon.on_word_candidates_changed(
        [WordCandidate(Source.SPELL_CHECKING, "x"), WordCandidate(Source.PREDICTION, "y")]
    )
    assert _words(ribbon) == ["x", "y"]


def test_pressed_appends():
    ribbon = WordRibbon()
    candidate = WordCandidate(Source.PREDICTION, "pressed")
    ribbon.on_word_candidate_pressed(candidate)
    assert ribbon.candidates == [candidate]


def test_released_emits_by_source():
    ribbon = WordRibbon()
    words, users = [], []
    ribbon.word_candidate_selected.connect(words.append)
    ribbon.user_candidate_selected.connect(users.append)
    ribbon.on_word_candidate_released(WordCandidate(Source.PREDICTION, "p"))
    ribbon.on_word_candidate_released(WordCandidate(Source.SPELL_CHECKING, "s"))
    ribbon.on_word_candidate_released(WordCandidate(Source.USER, "u"))
    ribbon.on_word_candidate_released(WordCandidate(Source.UNKNOWN, "n"))
    assert words == ["p", "s"]
    assert users == ["u"]


def test_set_word_ribbon_visible_clears():
    ribbon = WordRibbon()
    ribbon.append_candidate(WordCandidate(Source.PREDICTION, "a"))
    ribbon.set_word_ribbon_visible(True)
    assert ribbon.row_count() == 0


def test_enabled_setter_emits():
    ribbon = WordRibbon()
    seen = []
    ribbon.enabled_changed.connect(seen.append)
    ribbon.enabled = True
    assert ribbon.enabled is True
    assert seen == [True]


def test_valid_and_rect_follow_area():
    ribbon = WordRibbon()
    ribbon.origin = Point(4, 5)
    ribbon.area = Area(size=Size(100, 30))
    assert ribbon.valid() is True
    assert ribbon.rect() == Rect(4, 5, 100, 30)


def test_equality_compares_area_and_candidates():
    first, second = WordRibbon(), WordRibbon()
    assert first == second
    first.append_candidate(WordCandidate(Source.PREDICTION, "a"))
    assert not first == second
    second.append_candidate(WordCandidate(Source.PREDICTION, "a"))
    assert first == second
    second.area = Area(size=Size(10, 10))
    assert not first == second