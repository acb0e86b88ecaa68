"""
Loader tests for play catalogs and invoices, in both YAML and the
JSON layout used by plays.json / invoices.json.
"""
import json
from pathlib import Path

import pytest

from theater_statement import config
from theater_statement.datatypes import Invoice, Performance, Play
from theater_statement.errors import ConfigError


def test_bundled_sample_data():
    catalog = config.load_catalog()
    invoices = config.load_invoices()

    assert catalog.lookup("as-like") == Play("As You Like It", "comedy")
    assert invoices == [Invoice("BigCo", [
        Performance("hamlet", 55),
        Performance("as-like", 35),
        Performance("othello", 40),
    ])]


def test_load_catalog_json(tmp_path: Path):
    path = tmp_path / "plays.json"
    path.write_text(json.dumps({
        "hamlet": {"name": "Hamlet", "type": "tragedy"},
        "aida": {"name": "Aida", "type": "opera"},
    }))
    catalog = config.load_catalog(path)

    assert len(catalog) == 2
    # unknown genres load fine, they fail when priced
    assert catalog.lookup("aida").genre == "opera"


def test_load_catalog_nested_and_genre_alias(tmp_path: Path):
    path = tmp_path / "plays.yaml"
    path.write_text("plays:\n  p1:\n    name: Twelfth Night\n    genre: comedy\n")
    assert config.load_catalog(path).lookup("p1") == Play("Twelfth Night", "comedy")


def test_load_invoices_single_mapping(tmp_path: Path):
    path = tmp_path / "invoice.json"
    path.write_text(json.dumps({
        "customer": "Acme",
        "performances": [{"play_id": "hamlet", "audience": 12}],
    }))
    assert config.load_invoices(path) == [Invoice("Acme", [Performance("hamlet", 12)])]


def test_load_invoices_no_performances(tmp_path: Path):
    path = tmp_path / "invoices.yaml"
    path.write_text("invoices:\n  - customer: Empty\n")
    assert config.load_invoices(path) == [Invoice("Empty")]


@pytest.mark.parametrize("text", [
    "- just\n- a list\n",
    "hamlet:\n  type: tragedy\n",
    "hamlet:\n  name: Hamlet\n",
])
def test_bad_catalog(tmp_path: Path, text):
    path = tmp_path / "plays.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        config.load_catalog(path)


@pytest.mark.parametrize("text", [
    "42\n",
    "- performances: []\n",
    "- customer: X\n  performances:\n    - audience: 3\n",
    "- customer: X\n  performances:\n    - playID: hamlet\n      audience: lots\n",
    "- customer: X\n  performances:\n    - playID: hamlet\n      audience: -4\n",
    "- customer: X\n  performances:\n    - playID: hamlet\n      audience: 31.9\n",
    "- customer: X\n  performances:\n    - playID: hamlet\n      audience: true\n",
    "- customer: X\n  performances:\n    - playID: hamlet\n",
])
def test_bad_invoices(tmp_path: Path, text):
    path = tmp_path / "invoices.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        config.load_invoices(path)


def test_unreadable_file(tmp_path: Path):
    with pytest.raises(ConfigError):
        config.load_catalog(tmp_path / "missing.yaml")

    broken = tmp_path / "broken.yaml"
    broken.write_text("hamlet: [unclosed\n")
    with pytest.raises(ConfigError):
        config.load_catalog(broken)
