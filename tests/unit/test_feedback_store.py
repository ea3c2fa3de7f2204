from concurrent.futures import ThreadPoolExecutor

import pytest

from pose_feedback.common.exceptions import FeedbackNotFound
from pose_feedback.schemas.feedback_dto import FeedbackDraft
from pose_feedback.storage.feedback_store import InMemoryFeedbackStore
from tests.test_helpers import create_frame


def _draft(base_id="fb-ref-prac", feedback="ok", accuracy=90.0):
    return FeedbackDraft(
        base_id=base_id,
        reference_frame=create_frame("ref"),
        practice_frame=create_frame("prac"),
        feedback=feedback,
        accuracy_value=accuracy,
    )


def test_commit_then_get():
    store = InMemoryFeedbackStore()
    record = store.commit(_draft())

    assert record.feedback_id == "fb-ref-prac"
    assert store.get("fb-ref-prac") == record
    assert len(store) == 1


def test_get_unknown_id_raises_not_found():
    with pytest.raises(FeedbackNotFound) as exc_info:
        InMemoryFeedbackStore().get("fb-nope")
    assert exc_info.value.feedback_id == "fb-nope"


def test_repeated_pair_gets_versioned_ids():
    store = InMemoryFeedbackStore()
    first = store.commit(_draft(feedback="first"))
    second = store.commit(_draft(feedback="second"))
    third = store.commit(_draft(feedback="third"))

    assert [first.feedback_id, second.feedback_id, third.feedback_id] == [
        "fb-ref-prac",
        "fb-ref-prac-v2",
        "fb-ref-prac-v3",
    ]
    # 이전 레코드는 그대로 조회 가능 (덮어쓰기 없음)
    assert store.get("fb-ref-prac").feedback == "first"


def test_base_id_that_looks_like_a_version_does_not_collide():
    store = InMemoryFeedbackStore()
    store.commit(_draft(base_id="fb-a-b"))
    store.commit(_draft(base_id="fb-a-b"))  # → fb-a-b-v2
    clash = store.commit(_draft(base_id="fb-a-b-v2"))

    assert clash.feedback_id == "fb-a-b-v2-v2"
    assert store.list_ids() == ["fb-a-b", "fb-a-b-v2", "fb-a-b-v2-v2"]


def test_records_are_immutable():
    record = InMemoryFeedbackStore().commit(_draft())
    with pytest.raises(Exception):
        record.feedback = "edited"


def test_concurrent_commits_do_not_lose_writes():
    store = InMemoryFeedbackStore()
    with ThreadPoolExecutor(max_workers=8) as pool:
        records = list(pool.map(lambda i: store.commit(_draft(feedback=str(i))), range(50)))

    ids = [r.feedback_id for r in records]
    assert len(store) == 50
    assert len(set(ids)) == 50


def test_annotate_appends_warnings_without_touching_content():
    store = InMemoryFeedbackStore()
    record = store.commit(_draft(feedback="keep me"))

    store.annotate(record.feedback_id, ["tone_not_positive"])
    updated = store.annotate(record.feedback_id, ["too_long"])

    assert updated.warnings == ["tone_not_positive", "too_long"]
    assert store.get(record.feedback_id) == updated
    assert updated.feedback == "keep me"
    assert store.list_ids() == [record.feedback_id]
    # 처음 돌려받은 레코드 객체는 그대로
    assert record.warnings == []


def test_annotate_unknown_id_raises_not_found():
    with pytest.raises(FeedbackNotFound):
        InMemoryFeedbackStore().annotate("fb-nope", ["too_long"])
