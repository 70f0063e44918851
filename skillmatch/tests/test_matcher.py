from skillmatch.services.matcher import match, match_percentage, matched_skills

from conftest import posting


def test_scenario_ordering(scenario_postings):
    results = match({"Java", "SQL", "React"}, scenario_postings)

    assert [r.posting.id for r in results] == [2, 1, 3]
    assert results[0].matched_skills == ["Java", "SQL"]
    assert results[1].matched_skills == ["React"]
    assert results[2].matched_skills == ["SQL"]


def test_percentage_uses_posting_skill_count_by_default(scenario_postings):
    results = match({"Java", "SQL", "React"}, scenario_postings)
    assert [r.match_percentage for r in results] == [50, 25, 25]


def test_percentage_with_fixed_basis():
    results = match({"java"}, [posting(1, "Java", "Go")], basis=8)
    assert results[0].match_percentage == 13  # 12.5 rounds up


def test_case_insensitive():
    results = match({"Java"}, [posting(1, "JAVA")])
    assert len(results) == 1
    assert results[0].matched_skills == ["JAVA"]


def test_matched_keeps_posting_order():
    results = match({"c", "a"}, [posting(1, "A", "B", "C")])
    assert results[0].matched_skills == ["A", "C"]


def test_empty_user_skills():
    assert match(set(), [posting(1, "Java")]) == []
    assert match({"   "}, [posting(1, "Java")]) == []


def test_empty_catalog():
    assert match({"Java"}, []) == []


def test_zero_match_and_empty_postings_excluded():
    results = match({"Java"}, [posting(1), posting(2, "Rust"), posting(3, "Java")])
    assert [r.posting.id for r in results] == [3]


def test_sorted_descending_and_sound():
    postings = [
        posting(1, "a"),
        posting(2, "a", "b", "c"),
        posting(3, "x"),
        posting(4, "B", "a"),
        posting(5, "c"),
    ]
    user = {"A", "b", "C"}
    results = match(user, postings)

    counts = [len(r.matched_skills) for r in results]
    assert counts == sorted(counts, reverse=True)
    assert all(counts)
    for r in results:
        required = {s.lower() for s in r.posting.required_skills}
        assert {s.lower() for s in r.matched_skills} <= required
    # ties keep catalog order
    assert [r.posting.id for r in results] == [2, 4, 1, 5]


def test_idempotent(scenario_postings):
    skills = ["Java", "SQL", "React"]
    assert match(skills, scenario_postings) == match(skills, scenario_postings)


def test_match_percentage_edges():
    assert match_percentage(0, 4) == 0
    assert match_percentage(2, 0) == 0
    assert match_percentage(3, 4) == 75
    assert match_percentage(5, 4) == 100


def test_matched_skills_helper():
    assert matched_skills({"sql"}, ["SQL", "MySQL", "sql"]) == ["SQL", "sql"]
