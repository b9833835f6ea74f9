import numpy as np
import pandas as pd
import pytest

from bank_marketing import schema
from bank_marketing.exceptions import ParseError
from bank_marketing.feature_builder import FeatureBuilder


def _block_offsets():
    offsets = {}
    start = len(schema.NUMERIC_FIELDS) + len(schema.BOOLEAN_FIELDS)
    for name, _, categories, _ in schema.CATEGORICAL_FIELDS:
        offsets[name] = start
        start += len(categories)
    return offsets


def test_build_reference_record(fields_factory):
    x, y = FeatureBuilder().build(fields_factory())

    assert y == 0.0
    assert x.shape == (schema.N_FEATURES,)
    np.testing.assert_array_equal(x[:6], [35, 1000, 15, 1, -1, 0])
    np.testing.assert_array_equal(x[6:9], [0, 1, 0])

    # technician, single, tertiary, cellular, may, unknown
    expected_ones = {19, 23, 27, 30, 35, 43}
    assert set(np.flatnonzero(x[9:]) + 9) == expected_ones
    assert x[9:].sum() == len(expected_ones)


def test_build_one_hot_positions_follow_category_lists(fields_factory):
    offsets = _block_offsets()
    x, _ = FeatureBuilder().build(
        fields_factory(job="retired", marital="divorced", month="dec", poutcome="success")
    )
    assert x[offsets["job"] + schema.JOBS.index("retired")] == 1.0
    assert x[offsets["marital"] + 1] == 1.0
    assert x[offsets["month"] + 11] == 1.0
    assert x[offsets["poutcome"] + 3] == 1.0


def test_build_label_yes_is_positive(fields_factory):
    _, y = FeatureBuilder().build(fields_factory(y="yes"))
    assert y == 1.0


def test_month_is_lowercased_but_other_categoricals_are_exact(fields_factory):
    offsets = _block_offsets()
    x, _ = FeatureBuilder().build(fields_factory(month="MAY", job="Technician"))

    assert x[offsets["month"] + schema.MONTHS.index("may")] == 1.0
    job_block = x[offsets["job"]:offsets["job"] + len(schema.JOBS)]
    assert not job_block.any()


def test_unknown_category_gives_zero_block(fields_factory):
    offsets = _block_offsets()
    x, _ = FeatureBuilder().build(fields_factory(contact="carrier pigeon"))
    assert not x[offsets["contact"]:offsets["contact"] + 3].any()


def test_non_numeric_field_raises_parse_error(fields_factory):
    with pytest.raises(ParseError, match="balance"):
        FeatureBuilder().build(fields_factory(balance="lots"))

    with pytest.raises(ParseError):
        FeatureBuilder().build(fields_factory(age="nan"))


def test_parse_line_strips_quotes_and_skips_blank_or_short_lines():
    line = '30;"unemployed";"married";"primary";"no";1787;"no";"no";"cellular";19;"oct";79;1;-1;0;"unknown";"no"\n'
    fields = FeatureBuilder.parse_line(line)
    assert fields[1] == "unemployed"
    assert fields[16] == "no"

    assert FeatureBuilder.parse_line("") is None
    assert FeatureBuilder.parse_line("   \n") is None
    assert FeatureBuilder.parse_line(None) is None
    assert FeatureBuilder.parse_line('30;"admin."') is None


def test_build_line_matches_build(fields_factory):
    builder = FeatureBuilder()
    line = ";".join(fields_factory(y="yes"))
    x_line, y_line = builder.build_line(line)
    x, y = builder.build(fields_factory(y="yes"))

    np.testing.assert_array_equal(x_line, x)
    assert y_line == y == 1.0
    assert builder.build_line("") is None


def test_transform_skips_unparsable_rows(fields_factory):
    df = pd.DataFrame(
        [
            fields_factory(),
            fields_factory(age="forty"),
            fields_factory(y="yes"),
        ]
    )
    X, Y = FeatureBuilder(verbose=False).transform(df)

    assert X.shape == (2, schema.N_FEATURES)
    np.testing.assert_array_equal(Y, [[0.0], [1.0]])


def test_transform_empty_frame_keeps_feature_width():
    X, Y = FeatureBuilder().transform(pd.DataFrame(columns=range(schema.RECORD_WIDTH)))
    assert X.shape == (0, schema.N_FEATURES)
    assert Y.shape == (0, 1)
