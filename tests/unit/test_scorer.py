"""Unit tests for ATS sub-score calculations."""

import pytest

from scribe.contexts.screening import ATSScoreBreakdown, ExperienceEntry, ResumeRecord
from scribe.contexts.screening.scorer import (
    build_keyword_entries,
    count_special_characters,
    count_words,
    is_valid_email,
    is_valid_phone,
    keyword_importance,
    overall_score,
    relevant_keywords,
    score_formatting,
    score_keywords,
    score_length_for_word_count,
    score_readability,
    score_structure,
)
from scribe.contexts.taxonomy import get_taxonomy


def complete_resume(**changes) -> ResumeRecord:
    """Resume with every required field filled in."""
    fields = dict(
        name="Ada Lovelace",
        email="ada@example.com",
        phone="555-123-4567",
        summary="Backend engineer",
        skills="Python",
        experience=(
            ExperienceEntry(role="Engineer", company="Acme", description="Kept servers up"),
        ),
    )
    fields.update(changes)
    return ResumeRecord(**fields)


class TestContactChecks:
    """Tests for email, phone, and character checks."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "email,valid",
        [
            ("ada@example.com", True),
            ("a@b.c", True),
            ("bad-email", False),
            ("ada@example", False),
            ("ada lovelace@example.com", False),
            ("ada@@example.com", False),
            ("", False),
        ],
    )
    def test_email(self, email, valid):
        assert is_valid_email(email) is valid

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "phone,valid",
        [
            ("+1 (555) 123-4567", True),
            ("5551234567", True),
            ("555-1234", False),
            ("12", False),
            ("", False),
        ],
    )
    def test_phone(self, phone, valid):
        assert is_valid_phone(phone) is valid

    @pytest.mark.unit
    def test_special_characters(self):
        """Only characters outside word chars, whitespace, @, ., - count."""
        assert count_special_characters("C# & C++") == 4
        assert count_special_characters("ada@example.com well-known_name") == 0

    @pytest.mark.unit
    def test_count_words_matches_whitespace_split(self):
        """Pieces between whitespace runs, including empty edge pieces."""
        assert count_words("one two   three") == 3
        assert count_words("") == 1
        assert count_words(" padded") == 2


class TestFormatting:
    """Tests for the formatting sub-score."""

    @pytest.mark.unit
    def test_clean_resume_scores_100(self):
        assert score_formatting(complete_resume()) == 100

    @pytest.mark.unit
    def test_bad_contact_details(self):
        """Invalid email costs 10 and invalid phone costs 5."""
        resume = ResumeRecord(name="Ada Lovelace", email="bad-email", phone="12")
        assert score_formatting(resume) == 85

    @pytest.mark.unit
    def test_special_character_penalty(self):
        """Each special character costs 2 points."""
        assert score_formatting(complete_resume(summary="C# & C++ | Go!")) == 88

    @pytest.mark.unit
    def test_special_character_penalty_is_capped(self):
        """Special characters never cost more than 30 points."""
        assert score_formatting(complete_resume(summary="!" * 40)) == 70


class TestKeywords:
    """Tests for keyword relevance, importance, and coverage."""

    @pytest.mark.unit
    def test_relevant_keywords_append_new_role_keywords(self):
        """Role keywords not in the global list are appended once."""
        taxonomy = get_taxonomy()
        keywords, role_keywords = relevant_keywords("Frontend Engineer", taxonomy)

        assert keywords[: len(taxonomy.tech_keywords)] == list(taxonomy.tech_keywords)
        assert keywords[len(taxonomy.tech_keywords):] == ["responsive design"]
        assert "react" in role_keywords
        assert len(keywords) == len(set(keywords))

    @pytest.mark.unit
    def test_relevant_keywords_without_role(self):
        taxonomy = get_taxonomy()
        keywords, role_keywords = relevant_keywords(None, taxonomy)
        assert keywords == list(taxonomy.tech_keywords)
        assert role_keywords == set()

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "keyword,role_keywords,expected",
        [
            ("docker", set(), 2),
            ("python", set(), 4),
            ("vue", {"vue"}, 4),
            ("react", {"react"}, 5),
        ],
    )
    def test_keyword_importance(self, keyword, role_keywords, expected):
        """Base 2, high-importance 4, role-specific +2 capped at 5."""
        assert keyword_importance(keyword, role_keywords, get_taxonomy()) == expected

    @pytest.mark.unit
    def test_found_keywords_occur_in_text_or_skills(self):
        """Every found keyword literally occurs in the resume."""
        resume = complete_resume(skills="Python, Docker, Kubernetes", summary="AWS platform work")
        text = resume.get_all_text().lower()

        entries = build_keyword_entries(resume, "devops", get_taxonomy())

        found = [e for e in entries if e.found]
        assert {"python", "docker", "kubernetes", "aws"} <= {e.keyword for e in found}
        for entry in found:
            assert entry.keyword in text or any(entry.keyword in s for s in resume.get_skill_list())

    @pytest.mark.unit
    def test_variations_attached(self):
        entries = build_keyword_entries(ResumeRecord(), None, get_taxonomy())
        by_keyword = {e.keyword: e for e in entries}
        assert by_keyword["react"].variations == ("reactjs", "react.js")
        assert by_keyword["docker"].variations == ()

    @pytest.mark.unit
    def test_empty_resume_scores_zero(self):
        assert score_keywords(ResumeRecord(), None, get_taxonomy()) == 0

    @pytest.mark.unit
    def test_every_keyword_present_scores_100(self):
        taxonomy = get_taxonomy()
        resume = ResumeRecord(skills=", ".join(taxonomy.tech_keywords))
        assert score_keywords(resume, None, taxonomy) == 100


class TestStructure:
    """Tests for the structure sub-score."""

    @pytest.mark.unit
    def test_complete_resume_scores_100(self):
        assert score_structure(complete_resume()) == 100

    @pytest.mark.unit
    def test_missing_skills_and_experience(self):
        """No skills (-20) and no experience (-30) leaves at most 50."""
        resume = complete_resume(skills="", experience=())
        assert score_structure(resume) == 50

    @pytest.mark.unit
    def test_incomplete_experience_entry(self):
        """An empty entry costs 5 + 5 + 10."""
        assert score_structure(complete_resume(experience=(ExperienceEntry(),))) == 80

    @pytest.mark.unit
    def test_whitespace_only_fields_count_as_missing(self):
        assert score_structure(complete_resume(name="   ")) == 80

    @pytest.mark.unit
    def test_empty_resume_clamps_to_zero(self):
        assert score_structure(ResumeRecord()) == 0

    @pytest.mark.unit
    @pytest.mark.parametrize("field_name", ["name", "email", "phone", "summary", "skills"])
    def test_filling_a_field_never_lowers_structure(self, field_name):
        """Monotonicity: filling an empty required field cannot decrease the score."""
        empty = complete_resume(**{field_name: ""})
        filled = complete_resume(**{field_name: "filled in"})
        assert score_structure(filled) >= score_structure(empty)


class TestReadability:
    """Tests for the readability sub-score."""

    @pytest.mark.unit
    def test_bullet_verb_and_metric_scores_100(self):
        resume = ResumeRecord(
            skills="javascript, react, node.js",
            experience=(
                ExperienceEntry(description="• Built a dashboard that cut load time by 40%"),
            ),
        )
        assert score_readability(resume, get_taxonomy()) == 100

    @pytest.mark.unit
    def test_none_of_the_three_scores_50(self):
        resume = ResumeRecord(skills="javascript, react, node.js")
        assert score_readability(resume, get_taxonomy()) == 50

    @pytest.mark.unit
    def test_dash_lines_count_as_bullets(self):
        """A newline followed by '-' counts as a bullet; verb and metric still missing."""
        resume = ResumeRecord(
            experience=(ExperienceEntry(description="Platform work\n- dashboards\n- alerts"),)
        )
        assert score_readability(resume, get_taxonomy()) == 70

    @pytest.mark.unit
    @pytest.mark.parametrize("metric", ["40%", "10+ teams", "$500 saved", "3x faster"])
    def test_quantified_results(self, metric):
        resume = ResumeRecord(summary=f"Built tooling, {metric}")
        # Verb and metric present, no bullets
        assert score_readability(resume, get_taxonomy()) == 80


class TestLengthAndOverall:
    """Tests for the length sub-score and weighted overall score."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "words,expected",
        [
            (1, 20),
            (100, 30),
            (199, 60),
            (200, 60),
            (300, 80),
            (400, 100),
            (800, 100),
            (801, 80),
            (1000, 80),
            (1500, 90),
            (5000, 40),
        ],
    )
    def test_length_piecewise(self, words, expected):
        assert score_length_for_word_count(words) == expected

    @pytest.mark.unit
    def test_overall_weights(self):
        """Formatting 25%, keywords 30%, structure 20%, readability 15%, length 10%."""
        assert overall_score(ATSScoreBreakdown(100, 100, 100, 100, 100)) == 100
        assert overall_score(ATSScoreBreakdown(0, 0, 0, 0, 0)) == 0
        assert overall_score(ATSScoreBreakdown(100, 0, 0, 0, 0)) == 25
        assert overall_score(ATSScoreBreakdown(0, 0, 0, 0, 100)) == 10
