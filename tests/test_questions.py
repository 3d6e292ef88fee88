"""Tests for trivia_board.core.questions – question bank loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import yaml

from trivia_board.core.questions import (
    Category,
    Dataset,
    Question,
    QuestionRepository,
    has_revealable_answer,
    points_for_row,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _bank(columns: int = 5, rows: int = 4) -> dict:
    return {
        "categories": [
            {
                "name": f"Cat {c}",
                "questions": [
                    {"points": (r + 1) * 10, "text": f"Q{c}{r}", "answer": f"A{c}{r}"}
                    for r in range(rows)
                ],
            }
            for c in range(columns)
        ]
    }


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Dataclasses and helpers
# ---------------------------------------------------------------------------

class TestPointsForRow:
    def test_rows(self):
        assert [points_for_row(r) for r in range(4)] == [10, 20, 30, 40]


class TestDataset:
    def test_empty(self):
        assert Dataset.empty().categories == ()

    def test_category_out_of_range(self):
        ds = Dataset(categories=(Category(name="A"),))
        assert ds.category(0).name == "A"
        assert ds.category(1) is None
        assert ds.category(-1) is None

    def test_question_out_of_range(self):
        q = Question(points=10, text="t")
        ds = Dataset(categories=(Category(name="A", questions=(q,)),))
        assert ds.question(0, 0) is q
        assert ds.question(0, 1) is None
        assert ds.question(3, 0) is None

    def test_resolve_image_relative(self, tmp_path: Path):
        ds = Dataset(categories=(), base_dir=tmp_path)
        q = Question(points=10, text="t", image="images/cat.png")
        assert ds.resolve_image(q) == tmp_path / "images" / "cat.png"

    def test_resolve_image_absent(self, tmp_path: Path):
        ds = Dataset(categories=(), base_dir=tmp_path)
        assert ds.resolve_image(Question(points=10, text="t")) is None

    def test_frozen(self):
        q = Question(points=10, text="t")
        with pytest.raises(AttributeError):
            q.text = "other"  # type: ignore[misc]


class TestHasRevealableAnswer:
    def test_plain_question_with_answer(self):
        assert has_revealable_answer(Category(name="A"), Question(10, "t", "42"))

    def test_empty_answer(self):
        assert not has_revealable_answer(Category(name="A"), Question(10, "t", ""))

    def test_whitespace_answer(self):
        assert not has_revealable_answer(Category(name="A"), Question(10, "t", "   "))

    def test_activity_category(self):
        assert not has_revealable_answer(Category(name="A", is_activity=True), Question(10, "t", "42"))


# ---------------------------------------------------------------------------
# QuestionRepository – happy paths
# ---------------------------------------------------------------------------

class TestRepositoryHappy:
    def test_loads_json(self, tmp_path: Path):
        repo = QuestionRepository(_write_json(tmp_path / "questions.json", _bank()))
        ds = repo.load()
        assert len(ds.categories) == 5
        assert ds.categories[2].name == "Cat 2"
        assert ds.question(2, 3).text == "Q23"
        assert ds.question(2, 3).answer == "A23"
        assert repo.dataset is ds

    def test_loads_yaml(self, tmp_path: Path):
        path = tmp_path / "questions.yaml"
        path.write_text(yaml.dump(_bank(columns=2)), encoding="utf-8")
        ds = QuestionRepository(path).load()
        assert [c.name for c in ds.categories] == ["Cat 0", "Cat 1"]

    def test_defaults(self, tmp_path: Path):
        data = {"categories": [{"name": "A", "questions": [{"text": "t"}]}]}
        ds = QuestionRepository(_write_json(tmp_path / "q.json", data)).load()
        cat = ds.categories[0]
        assert cat.is_activity is False
        assert cat.questions[0].answer == ""
        assert cat.questions[0].points == 10
        assert cat.questions[0].image is None

    def test_activity_flag(self, tmp_path: Path):
        data = {"categories": [{"name": "Act", "isActivity": True, "questions": []}]}
        ds = QuestionRepository(_write_json(tmp_path / "q.json", data)).load()
        assert ds.categories[0].is_activity is True

    def test_numeric_answer_kept_as_text(self, tmp_path: Path):
        data = {"categories": [{"name": "A", "questions": [{"text": "t", "answer": 0}]}]}
        ds = QuestionRepository(_write_json(tmp_path / "q.json", data)).load()
        assert ds.question(0, 0).answer == "0"

    def test_image_reference(self, tmp_path: Path):
        data = {"categories": [{"name": "A", "questions": [{"text": "t", "image": "pic.png"}]}]}
        ds = QuestionRepository(_write_json(tmp_path / "q.json", data)).load()
        assert ds.resolve_image(ds.question(0, 0)) == tmp_path / "pic.png"

    def test_skips_non_mapping_question(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        data = {"categories": [{"name": "A", "questions": ["bad", {"text": "ok"}]}]}
        with caplog.at_level(logging.WARNING):
            ds = QuestionRepository(_write_json(tmp_path / "q.json", data)).load()
        assert [q.text for q in ds.categories[0].questions] == ["ok"]
        assert "not a mapping" in caplog.text

    def test_points_drift_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        data = {"categories": [{"name": "A", "questions": [{"points": 500, "text": "t"}]}]}
        with caplog.at_level(logging.WARNING):
            ds = QuestionRepository(_write_json(tmp_path / "q.json", data)).load()
        assert ds.question(0, 0).points == 500
        assert "shown as 10" in caplog.text

    def test_consistent_points_not_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING):
            QuestionRepository(_write_json(tmp_path / "q.json", _bank())).load()
        assert caplog.text == ""


# ---------------------------------------------------------------------------
# QuestionRepository – failures fall back to an empty dataset
# ---------------------------------------------------------------------------

class TestRepositoryFallback:
    def test_missing_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.ERROR):
            ds = QuestionRepository(tmp_path / "nope.json").load()
        assert ds == Dataset.empty()
        assert "Error loading questions" in caplog.text

    def test_malformed_json(self, tmp_path: Path):
        path = tmp_path / "q.json"
        path.write_text("{not json", encoding="utf-8")
        assert QuestionRepository(path).load().categories == ()

    def test_infinite_points_fall_back_to_row(self, tmp_path: Path):
        path = tmp_path / "q.json"
        path.write_text(
            '{"categories": [{"name": "A", "questions": [{"points": 1e999, "text": "t"}]}]}',
            encoding="utf-8",
        )
        assert QuestionRepository(path).load().question(0, 0).points == 10

    def test_infinite_points_in_yaml(self, tmp_path: Path):
        path = tmp_path / "q.yaml"
        path.write_text(
            "categories:\n  - name: A\n    questions:\n      - {points: .inf, text: t}\n",
            encoding="utf-8",
        )
        assert QuestionRepository(path).load().question(0, 0).points == 10

    def test_deeply_nested_json(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        path = tmp_path / "q.json"
        path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            assert QuestionRepository(path).load() == Dataset.empty()
        assert "Error loading questions" in caplog.text

    def test_malformed_yaml(self, tmp_path: Path):
        path = tmp_path / "q.yaml"
        path.write_text("categories: [unclosed", encoding="utf-8")
        assert QuestionRepository(path).load().categories == ()

    def test_root_not_mapping(self, tmp_path: Path):
        repo = QuestionRepository(_write_json(tmp_path / "q.json", [1, 2, 3]))
        assert repo.load().categories == ()

    def test_categories_not_list(self, tmp_path: Path):
        repo = QuestionRepository(_write_json(tmp_path / "q.json", {"categories": "x"}))
        assert repo.load().categories == ()

    def test_reload_after_failure_replaces_dataset(self, tmp_path: Path):
        path = _write_json(tmp_path / "q.json", _bank())
        repo = QuestionRepository(path)
        repo.load()
        path.write_text("garbage", encoding="utf-8")
        assert repo.load().categories == ()
        assert repo.dataset.categories == ()
