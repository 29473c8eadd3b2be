import pytest

from dispatchkit.objects import (
    ATTR_TYPE_FLAG,
    CACHELINE_SIZE,
    META_QUEUE,
    META_SEMAPHORE,
    META_SOURCE,
    ContinuationFlag,
    ObjectType,
    QueueWidth,
    round_up_to_cacheline,
    round_up_to_vector_size,
)


def test_object_type_values_fixed_by_source():
    assert ObjectType(0x10001) is ObjectType.QUEUE
    assert ObjectType(0x10002) is ObjectType.QUEUE_GLOBAL
    assert ObjectType(0x10003) is ObjectType.QUEUE_MGR
    assert ObjectType(0x20001) is ObjectType.SOURCE_KEVENT
    assert ObjectType(0x30000) is ObjectType.SEMAPHORE
    assert ObjectType(0) is ObjectType.CONTINUATION
    assert ObjectType(0x10001).meta() == 0x10000


@pytest.mark.parametrize(
    "tag, meta",
    [
        (ObjectType.CONTINUATION, 0),
        (ObjectType.QUEUE, META_QUEUE),
        (ObjectType.QUEUE_GLOBAL, META_QUEUE),
        (ObjectType.QUEUE_MGR, META_QUEUE),
        (ObjectType.QUEUE_ATTR, META_QUEUE),
        (ObjectType.SOURCE_KEVENT, META_SOURCE),
        (ObjectType.SOURCE_ATTR, META_SOURCE),
        (ObjectType.SEMAPHORE, META_SEMAPHORE),
    ],
)
def test_meta_type(tag, meta):
    assert tag.meta() == meta


def test_is_attribute():
    attrs = {t for t in ObjectType if ObjectType(t.value).is_attribute()}
    assert attrs == {ObjectType.QUEUE_ATTR, ObjectType.SOURCE_ATTR}
    assert ObjectType(0x10001).is_attribute() is False


def test_attribute_tags_combine_meta_and_flag():
    for tag in (ObjectType.QUEUE_ATTR, ObjectType.SOURCE_ATTR):
        assert tag.value == tag.meta() | ATTR_TYPE_FLAG


def test_continuation_flags():
    assert ContinuationFlag(0x1) is ContinuationFlag.ASYNC
    assert ContinuationFlag(0x2) is ContinuationFlag.BARRIER
    assert ContinuationFlag(0x4) is ContinuationFlag.GROUP
    combined = ContinuationFlag(0x5)
    assert combined == ContinuationFlag.ASYNC | ContinuationFlag.GROUP
    assert ContinuationFlag.GROUP in combined
    assert ContinuationFlag.BARRIER not in combined


def test_queue_width_codes():
    assert QueueWidth(-1) is QueueWidth.ACTIVE_CPUS
    assert QueueWidth(-2) is QueueWidth.MAX_PHYSICAL_CPUS
    assert QueueWidth(-3) is QueueWidth.MAX_LOGICAL_CPUS
    with pytest.raises(ValueError):
        QueueWidth(-4)


def test_cacheline_pinned_values():
    assert round_up_to_cacheline(0) == 0
    assert round_up_to_cacheline(1) == CACHELINE_SIZE
    assert round_up_to_cacheline(CACHELINE_SIZE) == CACHELINE_SIZE


@pytest.mark.parametrize("size", list(range(0, 300, 7)) + [63, 64, 65, 127, 128, 129])
def test_cacheline_invariants(size):
    result = round_up_to_cacheline(size)
    assert result % CACHELINE_SIZE == 0
    assert size <= result < size + CACHELINE_SIZE


@pytest.mark.parametrize("size", list(range(0, 100)))
def test_vector_size_invariants(size):
    result = round_up_to_vector_size(size)
    assert result % 16 == 0
    assert size <= result < size + 16


def test_vector_size_fixed_points():
    assert round_up_to_vector_size(15) == 16
    assert round_up_to_vector_size(16) == 16


def test_rounding_is_idempotent():
    for size in range(0, 500, 13):
        once = round_up_to_cacheline(size)
        assert round_up_to_cacheline(once) == once
        vec = round_up_to_vector_size(size)
        assert round_up_to_vector_size(vec) == vec


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        round_up_to_cacheline(-1)
    with pytest.raises(ValueError):
        round_up_to_vector_size(-5)


def test_non_integer_size_rejected():
    with pytest.raises(TypeError):
        round_up_to_cacheline(1.5)
    with pytest.raises(TypeError):
        round_up_to_vector_size("16")