import json
import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from theater_billing.config.settings import Settings, get_settings
from theater_billing.data.catalog import load_plays, load_invoices, parse_invoice
from theater_billing.engine import Play, Performance, Invoice, StatementBuilder


def test_bundled_data_builds_statements():
    """Every bundled invoice resolves against the bundled plays."""
    settings = get_settings()
    plays = load_plays(settings=settings)
    invoices = load_invoices(settings=settings)

    assert plays["hamlet"] == Play("Hamlet", "tragedy")
    assert invoices[0].customer == "BigCo"

    builder = StatementBuilder()
    totals = [builder.build(invoice, plays).total_amount for invoice in invoices]
    assert totals == [173000, 178000]


def test_load_plays_strips_values(tmp_path):
    path = tmp_path / "plays.csv"
    path.write_text("play_id,name,type\n hamlet , Hamlet ,tragedy \nnew,NA,comedy\n", encoding="utf-8")

    plays = load_plays(path)
    assert plays == {
        "hamlet": Play("Hamlet", "tragedy"),
        "new": Play("NA", "comedy"),
    }


def test_load_plays_keeps_unknown_types(tmp_path):
    path = tmp_path / "plays.csv"
    path.write_text("play_id,name,type\ncats,Cats,musical\n", encoding="utf-8")
    assert load_plays(path)["cats"].type == "musical"


def test_load_plays_missing_columns(tmp_path):
    path = tmp_path / "plays.csv"
    path.write_text("play_id,name\nhamlet,Hamlet\n", encoding="utf-8")
    with pytest.raises(ValueError, match="type"):
        load_plays(path)


def test_load_plays_duplicate_ids(tmp_path):
    path = tmp_path / "plays.csv"
    path.write_text("play_id,name,type\nhamlet,Hamlet,tragedy\nhamlet,Hamlet 2,tragedy\n", encoding="utf-8")
    with pytest.raises(ValueError, match="hamlet"):
        load_plays(path)


def test_load_plays_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_plays(tmp_path / "nope.csv")


def test_load_invoices_single_object(tmp_path):
    path = tmp_path / "invoice.json"
    path.write_text(json.dumps({
        "customer": "BigCo",
        "performances": [{"playID": "hamlet", "audience": 55}],
    }), encoding="utf-8")

    assert load_invoices(path) == [Invoice("BigCo", [Performance("hamlet", 55)])]


def test_settings_data_dir_override(tmp_path):
    (tmp_path / "plays.csv").write_text("play_id,name,type\nx,X,history\n", encoding="utf-8")
    (tmp_path / "invoices.json").write_text('[{"customer": "C", "performances": []}]', encoding="utf-8")
    settings = Settings.load(data_dir=tmp_path)

    assert load_plays(settings=settings) == {"x": Play("X", "history")}
    assert load_invoices(settings=settings) == [Invoice("C", [])]


@pytest.mark.parametrize("record", [
    {"performances": []},
    {"customer": "BigCo", "performances": [{"playID": "hamlet"}]},
    {"customer": "BigCo", "performances": [{"playID": "hamlet", "audience": 5.5}]},
    {"customer": "BigCo", "performances": [{"playID": "hamlet", "audience": "55"}]},
    ["not", "a", "dict"],
    {"customer": "BigCo", "performances": None},
    {"customer": "BigCo", "performances": {"playID": "hamlet", "audience": 55}},
    {"customer": "BigCo", "performances": [5]},
    {"customer": "BigCo", "performances": ["hamlet"]},
])
def test_parse_invoice_rejects_malformed(record):
    with pytest.raises(ValueError):
        parse_invoice(record)


def test_load_plays_blank_id(tmp_path):
    path = tmp_path / "plays.csv"
    path.write_text("play_id,name,type\nhamlet,Hamlet,tragedy\n  ,Nameless,comedy\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Blank play id"):
        load_plays(path)


def test_load_invoices_rejects_scalar_json(tmp_path):
    path = tmp_path / "invoices.json"
    path.write_text("42", encoding="utf-8")
    with pytest.raises(ValueError):
        load_invoices(path)


def test_print_statement_reports_malformed_invoices(tmp_path, capsys):
    """The CLI prints an error and exits 1 instead of raising."""
    scripts_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'scripts')
    if scripts_path not in sys.path:
        sys.path.insert(0, scripts_path)
    import print_statement

    path = tmp_path / "invoices.json"
    path.write_text(json.dumps([{"customer": "BigCo", "performances": None}]), encoding="utf-8")

    assert print_statement.main([str(path)]) == 1
    assert capsys.readouterr().out.startswith("ERROR: ")
