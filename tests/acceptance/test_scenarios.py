# pylint: disable=missing-docstring
import asyncio
import logging

import pytest

from serialtask import UNSET, create_serial_task, create_serial_task_async


def validate(user):
    if "@" not in user["email"]:
        raise ValueError("Invalid email")
    return user


def normalize_user(user):
    return {**user, "name": user["name"].strip().lower(), "email": user["email"].lower()}


def add_computed_fields(user):
    return {
        **user,
        "is_adult": user["age"] >= 18,
        "display_name": user["name"].capitalize(),
    }


def summarize(user):
    kind = "Adult" if user["is_adult"] else "Minor"
    return {**user, "summary": f"{user['display_name']} ({user['email']}) - {kind}"}


def authenticate(request):
    user_id = request["headers"].get("Authorization", "").removeprefix("Bearer ")
    return {
        **request,
        "metadata": {**request["metadata"], "authenticated": bool(user_id), "user_id": user_id},
    }


def mark(key):
    def handler(_request, last):
        return {**last, "metadata": {**last["metadata"], key: True}}

    return handler


def pass_request_and_last(_task, index, _tasks, args, last):
    if index == 0:
        return args
    return (*args, last)


def stop_unauthenticated(_task, index, _tasks, _args, last):
    return index > 0 and not last["metadata"]["authenticated"]


def skip_rate_limit_for_admin(_task, index, _tasks, _args, last):
    return index == 1 and last["metadata"]["user_id"] == "admin"


@pytest.fixture(name="user")
def get_user():
    return {"name": "  John Doe  ", "email": "JOHN@EXAMPLE.COM", "age": 25}


@pytest.fixture(name="handlers")
def get_handlers():
    return [
        authenticate,
        mark("rate_limited"),
        mark("validated"),
        mark("processed"),
        mark("formatted"),
    ]


class TestFunctionCompositionPipeline:
    def test_processes_user(self, user):
        process_user = create_serial_task(
            name="user_processor",
            tasks=[validate, normalize_user, add_computed_fields, summarize],
        )
        result = process_user(user)
        assert process_user.__name__ == "user_processor"
        assert process_user.arity == 1
        assert result.value == {
            "name": "john doe",
            "email": "john@example.com",
            "age": 25,
            "is_adult": True,
            "display_name": "John doe",
            "summary": "John doe (john@example.com) - Adult",
        }

    def test_invalid_user_raises(self, user):
        process_user = create_serial_task(
            tasks=[validate, normalize_user, add_computed_fields, summarize]
        )
        with pytest.raises(ValueError, match="Invalid email"):
            process_user({**user, "email": "nobody"})

    @pytest.mark.asyncio
    async def test_async_pipeline_matches_sync_pipeline(self, user):
        async def deferred_normalize(user_):
            await asyncio.sleep(0)
            return normalize_user(user_)

        tasks = [validate, normalize_user, add_computed_fields, summarize]
        expected = create_serial_task(tasks=tasks)(user)
        result = await create_serial_task_async(
            tasks=[validate, deferred_normalize, add_computed_fields, summarize]
        )(user)
        assert result == expected


class TestRequestHandlerChain:
    def test_authenticated_request_passes_all_handlers(self, handlers):
        handle = create_serial_task(
            name="http_handler",
            tasks=handlers,
            break_condition=stop_unauthenticated,
            skip_condition=skip_rate_limit_for_admin,
            result_wrapper=pass_request_and_last,
        )
        request = {"path": "/api/users", "headers": {"Authorization": "Bearer user123"}}
        result = handle({**request, "metadata": {}})
        assert result.break_at == -1
        assert result.skipped == []
        assert result.value["metadata"] == {
            "authenticated": True,
            "user_id": "user123",
            "rate_limited": True,
            "validated": True,
            "processed": True,
            "formatted": True,
        }

    def test_admin_skips_rate_limit(self, handlers):
        handle = create_serial_task(
            tasks=handlers,
            break_condition=stop_unauthenticated,
            skip_condition=skip_rate_limit_for_admin,
            result_wrapper=pass_request_and_last,
        )
        result = handle({"headers": {"Authorization": "Bearer admin"}, "metadata": {}})
        assert result.skipped == [1]
        assert result.results[1] is UNSET
        assert "rate_limited" not in result.value["metadata"]
        assert result.value["metadata"]["formatted"] is True

    def test_unauthenticated_request_breaks_after_authentication(self, handlers):
        handle = create_serial_task(
            tasks=handlers,
            break_condition=stop_unauthenticated,
            result_wrapper=pass_request_and_last,
        )
        result = handle({"headers": {}, "metadata": {}})
        assert result.break_at == 1
        assert result.value["metadata"]["authenticated"] is False
        assert result.results[1:] == [UNSET] * 4

    @pytest.mark.asyncio
    async def test_async_handlers_with_async_hooks(self, handlers):
        async def break_condition(*hook_args):
            await asyncio.sleep(0)
            return stop_unauthenticated(*hook_args)

        handle = create_serial_task_async(
            tasks=handlers,
            break_condition=break_condition,
            skip_condition=skip_rate_limit_for_admin,
            result_wrapper=pass_request_and_last,
        )
        result = await handle({"headers": {"Authorization": "Bearer admin"}, "metadata": {}})
        assert result.skipped == [1]
        assert result.break_at == -1


class TestLogging:
    def test_logs_through_named_module_loggers_without_own_handlers(self):
        for name in ("SerialTask", "SerialTaskAsync", "Options"):
            assert logging.getLogger(name).parent is logging.getLogger()
            assert not logging.getLogger(name).handlers
        assert not logging.getLogger("serialtask").handlers

    def test_break_and_skip_are_logged_on_debug(self, caplog, handlers):
        handle = create_serial_task(
            name="logged_handler",
            tasks=handlers,
            break_condition=stop_unauthenticated,
            skip_condition=skip_rate_limit_for_admin,
            result_wrapper=pass_request_and_last,
        )
        with caplog.at_level(logging.DEBUG, logger="SerialTask"):
            handle({"headers": {"Authorization": "Bearer admin"}, "metadata": {}})
        assert "'logged_handler' skips task 1" in caplog.text

    def test_failures_are_not_logged(self, caplog):
        def failing(_):
            raise RuntimeError("not logged")

        handle = create_serial_task(tasks=[failing])
        with caplog.at_level(logging.DEBUG):
            with pytest.raises(RuntimeError):
                handle(1)
        assert not [record for record in caplog.records if record.levelno >= logging.WARNING]
