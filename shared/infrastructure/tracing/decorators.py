"""
Decorador para criar spans automáticos em funções.
"""
import time
import functools
import asyncio
from typing import Callable, Any

from shared.infrastructure.logging.structlog_config import get_logger
from shared.infrastructure.tracing.context import (
    generate_span_id,
    get_trace_context,
    set_trace_context
)

logger = get_logger("tracing.decorator")


def log_span(
    event_name: str,
    log_args: bool = True,
    log_result: bool = True
):
    """
    Decorador que cria span automático para uma função.

    Loga `<event_name>_start`, `<event_name>_end` (com duração) e
    `<event_name>_error` quando a função levanta exceção. A exceção é
    sempre propagada.

    Args:
        event_name: Nome base do evento (ex: "board_analysis")
        log_args: Se deve logar os kwargs da função
        log_result: Se deve logar um resumo do resultado

    Exemplo:
        @log_span("agent_run", log_result=False)
        async def run(self, idea):
            ...
    """
    def decorator(func: Callable) -> Callable:
        def _open_span(kwargs: dict) -> tuple[str | None, float]:
            parent_span = get_trace_context()["span_id"]
            set_trace_context(span_id=generate_span_id(), parent_span_id=parent_span)

            log_data = {
                "event": f"{event_name}_start",
                **get_trace_context(),
                "function": func.__name__
            }
            if log_args:
                log_data["function_args"] = _summarize_args(kwargs)
            logger.info(**log_data)
            return parent_span, time.time()

        def _close_span(start_time: float, result: Any) -> None:
            log_data = {
                "event": f"{event_name}_end",
                **get_trace_context(),
                "status": "success",
                "duration_ms": (time.time() - start_time) * 1000
            }
            if log_result:
                log_data["result_summary"] = _summarize_result(result)
            logger.info(**log_data)

        def _fail_span(start_time: float, error: Exception) -> None:
            logger.error(
                event=f"{event_name}_error",
                **get_trace_context(),
                error_type=type(error).__name__,
                error_message=str(error),
                duration_before_error_ms=(time.time() - start_time) * 1000
            )

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            parent_span, start_time = _open_span(kwargs)
            try:
                result = await func(*args, **kwargs)
                _close_span(start_time, result)
                return result
            except Exception as e:
                _fail_span(start_time, e)
                raise
            finally:
                set_trace_context(span_id=parent_span)

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            parent_span, start_time = _open_span(kwargs)
            try:
                result = func(*args, **kwargs)
                _close_span(start_time, result)
                return result
            except Exception as e:
                _fail_span(start_time, e)
                raise
            finally:
                set_trace_context(span_id=parent_span)

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def _summarize_args(kwargs: dict, max_chars: int = 120) -> dict:
    """Trunca strings longas (ideias, prompts) antes de logar."""
    summary = {}
    for key, value in kwargs.items():
        if isinstance(value, str) and len(value) > max_chars:
            summary[key] = f"{value[:max_chars]}...[truncated]"
        else:
            summary[key] = value
    return summary


def _summarize_result(result: Any) -> Any:
    """
    Cria resumo do resultado para logging.
    Evita logar textos longos de LLM inteiros.
    """
    if result is None:
        return None

    if isinstance(result, (int, float, bool)):
        return result

    if isinstance(result, str):
        return {"type": "str", "length": len(result)}

    if isinstance(result, list):
        return {"type": "list", "length": len(result)}

    if isinstance(result, dict):
        return {"type": "dict", "keys": list(result.keys())}

    return {"type": type(result).__name__}
