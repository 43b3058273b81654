"""Tests for commentary generation: clause selection, order and determinism."""

from insight_api.narrative import (
    CLOSING_LINES,
    HIGH_PRESSURE_LINE,
    MOMENTUM_LINE,
    OPENING_LINES,
    generate_analysis,
    pick,
    scenario_seed,
)
from insight_api.parser import parse_scenario


class TestSeedAndPick:
    def test_seed_uses_text_runs_and_balls(self, make_record):
        rec = make_record(normalized_text="abcde", runs=3)
        assert scenario_seed(rec) == 8

    def test_pick_wraps(self):
        assert pick(OPENING_LINES, 7) == OPENING_LINES[2]

    def test_opening_and_closing_follow_seed(self, make_record):
        rec = make_record(normalized_text="abcde", runs=3)
        text = generate_analysis(rec, 50)
        assert text.startswith(OPENING_LINES[3])
        assert text.endswith(CLOSING_LINES[4])

    def test_chase_example_lines(self):
        # len 46 + 20 runs + 6 balls = 72
        rec = parse_scenario("India needs 20 runs in 6 balls, 2 wickets left")
        text = generate_analysis(rec, 3)
        assert text.startswith(OPENING_LINES[2])
        assert text.endswith(CLOSING_LINES[3])


class TestRunRateClause:
    def test_urgent_finish(self, make_record):
        text = generate_analysis(make_record(runs=20, balls=6), 3)
        assert "With just 6 balls remaining and 20 runs needed" in text
        assert "20.0 per over" in text

    def test_single_ball(self, make_record):
        text = generate_analysis(make_record(runs=6, balls=1), 3)
        assert "With just 1 ball remaining" in text
        assert "36.0 per over" in text

    def test_zero_balls_does_not_raise(self, make_record):
        text = generate_analysis(make_record(runs=4, balls=0), 3)
        assert "With just 0 ball remaining" in text
        assert "Infinity per over" in text

    def test_herculean(self, make_record):
        text = generate_analysis(make_record(runs=100, balls=36), 8)
        assert "100 runs off 36 balls translates to a required run rate of 16.7" in text
        assert "Herculean" in text

    def test_challenging(self, make_record):
        text = generate_analysis(make_record(runs=60, balls=36), 44)
        assert "required run rate of 10.0" in text
        assert "challenging but achievable" in text

    def test_twelve_is_still_challenging(self, make_record):
        text = generate_analysis(make_record(runs=72, balls=36), 44)
        assert "challenging but achievable" in text

    def test_nine_is_gettable(self, make_record):
        text = generate_analysis(make_record(runs=54, balls=36), 62)
        assert "required run rate of 9.0" in text
        assert "gettable" in text

    def test_runs_only(self, make_record):
        text = generate_analysis(make_record(runs=280), 50)
        assert "With 280 runs on the board" in text

    def test_omitted_without_runs(self, make_record):
        text = generate_analysis(make_record(balls=30), 50)
        assert "required run rate" not in text
        assert "on the board" not in text


class TestWicketsClause:
    def test_last_wicket_with_collapse(self, make_record):
        text = generate_analysis(make_record(wickets=1, is_collapse_risk=True), 20)
        assert "only 1 wicket remaining" in text
        assert "exposed the tail" in text

    def test_last_wicket_without_collapse(self, make_record):
        text = generate_analysis(make_record(wickets=1), 20)
        assert "volatile commodity" in text

    def test_zero_wickets(self, make_record):
        text = generate_analysis(make_record(wickets=0), 20)
        assert "only 0 wickets remaining" in text

    def test_buffer_band(self, make_record):
        for wickets in (2, 3):
            text = generate_analysis(make_record(wickets=wickets), 40)
            assert f"{wickets} wickets in hand gives them some buffer" in text

    def test_comfort_band(self, make_record):
        text = generate_analysis(make_record(wickets=4), 55)
        assert "With 4 wickets available" in text

    def test_omitted_without_wickets(self, make_record):
        text = generate_analysis(make_record(), 50)
        assert "wicket" not in text


class TestProbabilityClause:
    def test_bands(self, make_record):
        rec = make_record()
        assert "At 70% win probability" in generate_analysis(rec, 70)
        assert "The 69% win probability reflects a genuine contest" in generate_analysis(rec, 69)
        assert "The 50% win probability" in generate_analysis(rec, 50)
        assert "A 49% chance is daunting" in generate_analysis(rec, 49)
        assert "A 30% chance is daunting" in generate_analysis(rec, 30)
        assert "At just 29%, this is a long shot" in generate_analysis(rec, 29)


class TestClauseOrder:
    def test_fixed_order(self, make_record):
        rec = make_record(
            normalized_text="x",
            runs=20,
            balls=12,
            wickets=1,
            is_high_pressure=True,
            has_momentum=True,
            is_collapse_risk=True,
        )
        text = generate_analysis(rec, 10)
        seed = scenario_seed(rec)
        positions = [
            text.index(OPENING_LINES[seed % 5]),
            text.index("20 runs off 12 balls"),
            text.index("Crucially"),
            text.index(HIGH_PRESSURE_LINE),
            text.index(MOMENTUM_LINE),
            text.index("At just 10%"),
            text.index(CLOSING_LINES[(seed + 1) % 5]),
        ]
        assert positions == sorted(positions)

    def test_sentences_joined_by_single_space(self, make_record):
        text = generate_analysis(make_record(), 50)
        assert "  " not in text
        assert not text.startswith(" ")
        assert not text.endswith(" ")

    def test_deterministic(self):
        rec = parse_scenario("Last over thriller, 12 runs needed, 1 wicket left")
        assert generate_analysis(rec, 27) == generate_analysis(rec, 27)


class TestFixedSentences:
    def test_high_pressure_sentence(self):
        assert HIGH_PRESSURE_LINE == (
            "The high-stakes nature of this game amplifies every error — a misfield, "
            "a dropped catch, or a wide could swing the momentum catastrophically."
        )

    def test_momentum_sentence(self):
        assert MOMENTUM_LINE == (
            "Momentum is firmly with the batting side right now. A batter in this kind of "
            "form can make the required rate feel irrelevant — momentum is its own weapon."
        )

    def test_pool_lines(self):
        assert OPENING_LINES[2] == "All eyes are on the middle — this is what cricket is made of."
        assert CLOSING_LINES[1] == "Expect fireworks — or heartbreak — in these final moments."

    def test_favourites_sentence(self, make_record):
        text = generate_analysis(make_record(), 75)
        assert (
            "At 75% win probability, the batting side are clear favourites — "
            "but in cricket, nothing is guaranteed until that final run is scored."
        ) in text

    def test_tied_rate_rounds_up_in_text(self):
        rec = parse_scenario("Team needs 11 runs off 8 balls")
        text = generate_analysis(rec, 62)
        assert "11 runs off 8 balls translates to a required run rate of 8.3 — a gettable target" in text
