"""Unit tests for per-source signal converters."""

from datetime import datetime

import pytest

from scribe.contexts.assessment import (
    ManualEntry,
    PracticeRecord,
    ProficiencyLevel,
    ProjectRecord,
    QuizResult,
    SkillSource,
)
from scribe.contexts.assessment.converters import (
    manual_to_assessments,
    practice_to_assessments,
    project_count_to_level,
    projects_to_assessments,
    quiz_score_to_level,
    quiz_to_assessments,
    solve_rate_to_level,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "score,level",
    [
        (95, ProficiencyLevel.EXPERT),
        (90, ProficiencyLevel.EXPERT),
        (85, ProficiencyLevel.ADVANCED),
        (75, ProficiencyLevel.ADVANCED),
        (60, ProficiencyLevel.INTERMEDIATE),
        (59.9, ProficiencyLevel.BEGINNER),
    ],
)
def test_quiz_breakpoints(score, level):
    assert quiz_score_to_level(score) is level


@pytest.mark.unit
@pytest.mark.parametrize(
    "rate,level",
    [
        (1.0, ProficiencyLevel.EXPERT),
        (0.9, ProficiencyLevel.EXPERT),
        (0.7, ProficiencyLevel.ADVANCED),
        (0.5, ProficiencyLevel.INTERMEDIATE),
        (0.49, ProficiencyLevel.BEGINNER),
    ],
)
def test_solve_rate_breakpoints(rate, level):
    assert solve_rate_to_level(rate) is level


@pytest.mark.unit
@pytest.mark.parametrize(
    "count,level",
    [(1, ProficiencyLevel.BEGINNER), (2, ProficiencyLevel.INTERMEDIATE), (3, ProficiencyLevel.ADVANCED),
     (7, ProficiencyLevel.ADVANCED)],
)
def test_project_count_breakpoints(count, level):
    assert project_count_to_level(count) is level


class TestQuizConverter:
    """Tests for quiz results."""

    @pytest.mark.unit
    def test_one_verified_assessment_per_quiz(self):
        taken = datetime(2024, 3, 1)
        (assessment,) = quiz_to_assessments([QuizResult(topic="JavaScript", score=85, completed_at=taken)])

        assert assessment.skill == "JavaScript"
        assert assessment.level is ProficiencyLevel.ADVANCED
        assert assessment.verified is True
        assert assessment.source is SkillSource.QUIZ
        assert assessment.score == 85
        assert assessment.completed_at == taken

    @pytest.mark.unit
    def test_score_clamped_and_blank_topics_skipped(self):
        assessments = quiz_to_assessments([QuizResult(topic="Go", score=130), QuizResult(topic=" ")])
        assert len(assessments) == 1
        assert assessments[0].score == 100
        assert assessments[0].level is ProficiencyLevel.EXPERT


class TestPracticeConverter:
    """Tests for practice-problem aggregation."""

    @pytest.mark.unit
    def test_grouped_by_topic(self):
        practice = [
            PracticeRecord("p1", topics=("Arrays", "Graphs"), solved=True, last_attempt=datetime(2024, 1, 1)),
            PracticeRecord("p2", topics=("Arrays",), solved=True, last_attempt=datetime(2024, 2, 1)),
            PracticeRecord("p3", topics=("Arrays",), solved=False),
        ]
        by_skill = {a.skill: a for a in practice_to_assessments(practice)}

        arrays = by_skill["Data Structures - Arrays"]
        assert arrays.level is ProficiencyLevel.INTERMEDIATE
        assert arrays.score == 67
        assert arrays.completed_at == datetime(2024, 2, 1)
        assert arrays.source is SkillSource.DSA

        graphs = by_skill["Data Structures - Graphs"]
        assert graphs.level is ProficiencyLevel.EXPERT
        assert graphs.score == 100

    @pytest.mark.unit
    def test_no_practice(self):
        assert practice_to_assessments([]) == []


class TestProjectConverter:
    """Tests for project technology counts."""

    @pytest.mark.unit
    def test_counts_projects_not_mentions(self):
        """A technology listed twice in one project counts once, ignoring case."""
        projects = [
            ProjectRecord("Blog", technologies=("React", "react", "Node.js")),
            ProjectRecord("Shop", technologies=("REACT",), completed_at=datetime(2024, 5, 1)),
            ProjectRecord("Chat", technologies=("React",), completed_at=datetime(2024, 4, 1)),
        ]
        by_skill = {a.skill: a for a in projects_to_assessments(projects)}

        assert set(by_skill) == {"React", "Node.js"}
        assert by_skill["React"].level is ProficiencyLevel.ADVANCED
        assert by_skill["React"].completed_at == datetime(2024, 5, 1)
        assert by_skill["Node.js"].level is ProficiencyLevel.BEGINNER
        assert all(a.verified and a.source is SkillSource.PROJECT for a in by_skill.values())


class TestManualConverter:
    """Tests for self-reported skills."""

    @pytest.mark.unit
    def test_unverified_with_default_level(self):
        assessments = manual_to_assessments(
            [
                ManualEntry("Docker", ProficiencyLevel.ADVANCED),
                ManualEntry("Kubernetes"),
                ManualEntry(""),
            ]
        )

        assert [(a.skill, a.level) for a in assessments] == [
            ("Docker", ProficiencyLevel.ADVANCED),
            ("Kubernetes", ProficiencyLevel.BEGINNER),
        ]
        assert not any(a.verified for a in assessments)
        assert all(a.source is SkillSource.MANUAL for a in assessments)
