import pytest

from club_schemas import ErrorKind, Resolution, SchemaValidationError, TaggedUnion
from club_schemas.schemas import McqQuizQuestion, TextQuizQuestion

VARIANTS = {"MCQ": McqQuizQuestion, "TEXT": TextQuizQuestion}


@pytest.fixture(params=[Resolution.TAGGED, Resolution.ORDERED])
def union(request):
    return TaggedUnion("questionType", VARIANTS, resolution=request.param)


def test_picks_variant_by_tag(union, mcq_quiz_question, text_quiz_question):
    assert isinstance(union.parse(mcq_quiz_question), McqQuizQuestion)
    assert isinstance(union.parse(text_quiz_question), TextQuizQuestion)


def test_missing_tag():
    union = TaggedUnion("questionType", VARIANTS)

    with pytest.raises(SchemaValidationError) as exc_info:
        union.parse({"id": 1})

    (err,) = exc_info.value.errors
    assert err.path == ("questionType",)
    assert err.kind is ErrorKind.MISSING_FIELD


@pytest.mark.parametrize("tag", ["mcq", "", 1, None, ["MCQ"]])
def test_unrecognized_tag(tag):
    union = TaggedUnion("questionType", VARIANTS)

    with pytest.raises(SchemaValidationError) as exc_info:
        union.parse({"questionType": tag})

    (err,) = exc_info.value.errors
    assert err.kind is ErrorKind.UNKNOWN_DISCRIMINANT


def test_tagged_rejects_non_mapping():
    union = TaggedUnion("questionType", VARIANTS)

    with pytest.raises(SchemaValidationError) as exc_info:
        union.parse("MCQ")

    assert exc_info.value.errors[0].kind is ErrorKind.TYPE_MISMATCH


def test_needs_variants():
    with pytest.raises(ValueError):
        TaggedUnion("questionType", {})
