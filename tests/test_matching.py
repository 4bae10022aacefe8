"""Scorer rules and ranking properties."""
from internship_portal.schemas.schemas import Internship, InternshipPreferences
from internship_portal.services.catalog import DEFAULT_INTERNSHIPS
from internship_portal.services.matching_service import score_internship, score_internships


def make_internship(id, **overrides):
    fields = dict(
        id=id, title=f"Intern {id}", company="Acme", location="Pune", duration="3 Months",
        stipend="₹5,000/month", required_skills=["python"], sector="technology",
        work_mode="remote", education_level="bachelor",
    )
    fields.update(overrides)
    return Internship(**fields)


def test_reference_example_ranks_software_intern_first():
    prefs = InternshipPreferences(
        technical_skills=["programming"], soft_skills=[], preferred_cities=["bangalore"],
        work_mode="hybrid", sector_interest=["technology"], education_level="bachelor",
    )
    results = score_internships(prefs, DEFAULT_INTERNSHIPS)

    assert results[0].id == "1"
    assert results[0].title == "Software Development Intern"
    assert results[0].score == 25
    assert results[0].matching_skills == ["programming"]


def test_each_rule_adds_its_weight():
    internship = make_internship("x")
    base = InternshipPreferences()
    assert score_internship(base, internship).score == 0

    assert score_internship(InternshipPreferences(technical_skills=["python"]), internship).score == 10
    assert score_internship(InternshipPreferences(soft_skills=["python"]), internship).score == 10
    assert score_internship(InternshipPreferences(preferred_cities=["pune"]), internship).score == 5
    assert score_internship(InternshipPreferences(preferred_cities=["any"]), internship).score == 5
    assert score_internship(InternshipPreferences(work_mode="remote"), internship).score == 3
    assert score_internship(InternshipPreferences(work_mode="any"), internship).score == 3
    assert score_internship(InternshipPreferences(sector_interest=["technology"]), internship).score == 5
    assert score_internship(InternshipPreferences(education_level="bachelor"), internship).score == 2


def test_location_compared_against_lowercased_city_only():
    internship = make_internship("x", location="Pune")
    assert score_internship(InternshipPreferences(preferred_cities=["Pune"]), internship).score == 0


def test_matching_skills_keep_required_order():
    internship = make_internship("x", required_skills=["c", "a", "b"])
    prefs = InternshipPreferences(technical_skills=["b", "a"], soft_skills=["z"])
    scored = score_internship(prefs, internship)
    assert scored.matching_skills == ["a", "b"]
    assert scored.score == 20


def test_disjoint_preferences_give_no_recommendations():
    prefs = InternshipPreferences(
        technical_skills=["cooking"], soft_skills=["singing"], preferred_cities=["chennai"],
        work_mode="underwater", sector_interest=["agriculture"], education_level="phd",
    )
    assert score_internships(prefs, DEFAULT_INTERNSHIPS) == []


def test_ties_keep_catalog_order_and_limit_applies():
    catalog = [make_internship(str(i)) for i in range(8)]
    prefs = InternshipPreferences(work_mode="any")
    results = score_internships(prefs, catalog)
    assert [r.id for r in results] == ["0", "1", "2", "3", "4"]
    assert all(r.score == 3 for r in results)


def test_results_sorted_by_score_descending():
    catalog = [
        make_internship("low", required_skills=[]),
        make_internship("high", required_skills=["python", "sql"]),
        make_internship("mid", required_skills=["python"]),
    ]
    prefs = InternshipPreferences(technical_skills=["python", "sql"], work_mode="remote")
    results = score_internships(prefs, catalog, limit=2)
    assert [r.id for r in results] == ["high", "mid"]
    assert [r.score for r in results] == [23, 13]


def test_empty_catalog():
    assert score_internships(InternshipPreferences(work_mode="any"), []) == []
