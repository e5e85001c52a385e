import asyncio

import pytest

from krishi_ai.models.assembly import AssemblyState, FallbackReason, ResultSource
from krishi_ai.services.assembly_runtime import (
    AssemblyRuntime,
    InvalidAssemblyTransition,
    ModelCallFailed,
)

from tests.stubs import StubTextGenerator


def make_runtime(generator, timeout=None):
    return AssemblyRuntime(
        action="test",
        fallback_for=lambda reason: f"fallback:{reason.value}",
        generator=generator,
        timeout=timeout,
    )


def test_fallback_is_built_before_the_model_is_called():
    runtime = make_runtime(StubTextGenerator())
    assert runtime.state is AssemblyState.NOT_STARTED
    assert runtime.fallback == "fallback:parse_failure"


@pytest.mark.asyncio
async def test_happy_path_walks_every_state():
    runtime = make_runtime(StubTextGenerator('{"a": 1}'))
    data = await runtime.fetch("prompt")
    assert data == {"a": 1}
    assert runtime.state is AssemblyState.NORMALIZING
    runtime.advance(AssemblyState.VALIDATING)
    result = runtime.complete("value")

    assert result.state is AssemblyState.ASSEMBLED
    assert result.source is ResultSource.AI
    assert result.fallback_reason is None
    assert not result.used_fallback


def test_complete_with_fallback_fields_is_merged():
    runtime = make_runtime(StubTextGenerator())
    for state in (
        AssemblyState.CALLING_MODEL,
        AssemblyState.EXTRACTING,
        AssemblyState.NORMALIZING,
        AssemblyState.VALIDATING,
    ):
        runtime.advance(state)
    result = runtime.complete("value", fallback_fields=["summary"])
    assert result.source is ResultSource.MERGED
    assert result.used_fallback


def test_skipping_a_state_is_rejected():
    runtime = make_runtime(StubTextGenerator())
    with pytest.raises(InvalidAssemblyTransition):
        runtime.advance(AssemblyState.VALIDATING)


def test_terminal_states_are_final():
    runtime = make_runtime(StubTextGenerator())
    runtime.fail(FallbackReason.PARSE_FAILURE)
    with pytest.raises(InvalidAssemblyTransition):
        runtime.advance(AssemblyState.CALLING_MODEL)
    with pytest.raises(InvalidAssemblyTransition):
        runtime.fail(FallbackReason.PARSE_FAILURE)


@pytest.mark.asyncio
async def test_timeout_becomes_fallback_reason():
    runtime = make_runtime(StubTextGenerator("{}", delay=1), timeout=0.01)
    with pytest.raises(ModelCallFailed) as excinfo:
        await runtime.call_model("prompt")
    assert excinfo.value.reason is FallbackReason.MODEL_TIMEOUT

    result = runtime.fail(excinfo.value.reason)
    assert result.value == "fallback:model_timeout"
    assert result.state is AssemblyState.FAILED_FALLBACK


@pytest.mark.asyncio
async def test_empty_response():
    runtime = make_runtime(StubTextGenerator("  \n"))
    with pytest.raises(ModelCallFailed) as excinfo:
        await runtime.fetch("prompt")
    assert excinfo.value.reason is FallbackReason.EMPTY_RESPONSE


@pytest.mark.asyncio
async def test_parse_failure_uses_eager_fallback():
    runtime = make_runtime(StubTextGenerator("no json"))
    with pytest.raises(ModelCallFailed) as excinfo:
        await runtime.fetch("prompt")
    result = runtime.fail(excinfo.value.reason)
    assert result.value == "fallback:parse_failure"
    assert result.source is ResultSource.FALLBACK


@pytest.mark.asyncio
async def test_concurrent_runs_do_not_share_state():
    slow = make_runtime(StubTextGenerator('{"n": 1}', delay=0.02))
    fast = make_runtime(StubTextGenerator('{"n": 2}'))
    first, second = await asyncio.gather(slow.fetch("a"), fast.fetch("b"))
    assert (first, second) == ({"n": 1}, {"n": 2})
