"""
Metricas Prometheus do Board AI.

Expostas via start_http_server quando BoardSettings.metrics_port > 0.
"""

from prometheus_client import Counter, Histogram, Gauge, start_http_server

# --- Contadores ---

board_updates_total = Counter(
    "board_updates_total", "Total de updates do Telegram processados",
    ["kind"],
)

board_analyses_total = Counter(
    "board_analyses_total", "Total de analises executadas",
    ["status"],
)

board_expert_failures_total = Counter(
    "board_expert_failures_total", "Falhas de especialistas substituidas por placeholder",
    ["role"],
)

board_saves_total = Counter(
    "board_saves_total", "Tentativas de salvar analise",
    ["status"],
)

# --- Histogramas ---

board_agent_duration = Histogram(
    "board_agent_duration_seconds", "Tempo por chamada de agente",
    ["role"],
    buckets=[1, 5, 15, 30, 60, 120, 300, 600],
)

board_analysis_duration = Histogram(
    "board_analysis_duration_seconds", "Tempo total de uma analise",
    buckets=[10, 30, 60, 120, 300, 600, 900, 1200],
)

# --- Gauges ---

board_analyses_in_flight = Gauge(
    "board_analyses_in_flight", "Analises em background em andamento",
)


def start_metrics_server(port: int) -> bool:
    """Sobe o endpoint /metrics. Retorna False se desabilitado (porta 0)."""
    if port <= 0:
        return False
    start_http_server(port)
    return True
