import logging
import sys

import pytest

from bank_marketing.utils.logger import get_logger

HEADER = [
    "age", "job", "marital", "education", "default", "balance", "housing",
    "loan", "contact", "day", "month", "duration", "campaign", "pdays",
    "previous", "poutcome", "y",
]

DEFAULT_RECORD = {
    "age": "35",
    "job": "technician",
    "marital": "single",
    "education": "tertiary",
    "default": "no",
    "balance": "1000",
    "housing": "yes",
    "loan": "no",
    "contact": "cellular",
    "day": "15",
    "month": "may",
    "duration": "120",
    "campaign": "1",
    "pdays": "-1",
    "previous": "0",
    "poutcome": "unknown",
    "y": "no",
}

NUMERIC_COLUMNS = {"age", "balance", "day", "duration", "campaign", "pdays", "previous"}


def make_fields(**overrides) -> list:
    record = dict(DEFAULT_RECORD, **overrides)
    return [str(record[name]) for name in HEADER]


def to_line(fields) -> str:
    """Render fields the way bank.csv does: strings quoted, numbers bare."""
    out = []
    for name, value in zip(HEADER, fields):
        out.append(value if name in NUMERIC_COLUMNS else f'"{value}"')
    return ";".join(out)


@pytest.fixture()
def fields_factory():
    return make_fields


@pytest.fixture()
def write_bank_csv(tmp_path):
    """Write records (field lists or raw strings) under a quoted header line."""
    def _write(name, records):
        lines = [";".join(f'"{h}"' for h in HEADER)]
        for rec in records:
            lines.append(rec if isinstance(rec, str) else to_line(rec))
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture()
def log_output(capsys):
    """Route the named console loggers to the captured stdout.

    Handlers are created once per logger name, so they may still hold the
    stream of an earlier test; rebind them for the duration of this one.
    """
    rebound = []

    def _capture(*names):
        for name in names:
            for handler in get_logger(name).handlers:
                if type(handler) is not logging.StreamHandler:
                    continue  # leave pytest's own capture handlers alone
                rebound.append((handler, handler.stream))
                handler.stream = sys.stdout
        return capsys

    captured_stream = sys.stdout
    yield _capture
    for handler, stream in rebound:
        closed = getattr(stream, "closed", False)
        handler.stream = sys.__stdout__ if stream is captured_stream or closed else stream
