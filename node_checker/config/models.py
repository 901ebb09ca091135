"""
Node Checker Config - Configuration models.

Pydantic models for type-safe configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from node_checker.core.types import NodeAddress


class RunnerConfig(BaseModel):
    """Blocking runner settings."""

    metrics_fetch_delay_secs: int = Field(
        default=5, ge=0, description="Delay between the two metrics snapshots in seconds"
    )


class NodeAddressConfig(BaseModel):
    """Where a node can be reached."""

    url: str = Field(description="Node base url, e.g. http://127.0.0.1")
    api_port: int = Field(default=8080, ge=1, le=65535, description="REST API port")
    metrics_port: int = Field(default=9101, ge=1, le=65535, description="Metrics port")

    def to_node_address(self) -> NodeAddress:
        return NodeAddress(url=self.url, api_port=self.api_port, metrics_port=self.metrics_port)


class BaselineConfig(BaseModel):
    """Baseline node identity."""

    node_address: NodeAddressConfig
    chain_id: int = Field(ge=0, description="Chain id the target must match")
    role_type: str = Field(default="full_node", description="Role the target must match")


class CollectorConfig(BaseModel):
    """HTTP collector settings."""

    timeout_secs: float = Field(default=10.0, gt=0, description="Request timeout in seconds")
    retry_attempts: int = Field(default=3, ge=1, le=10, description="Attempts per fetch")


class BuildVersionConfig(BaseModel):
    enabled: bool = True


class HardwareConfig(BaseModel):
    enabled: bool = True
    min_cpu_count: int = Field(default=8, ge=1)
    min_memory_kb: int = Field(default=31 * 1024 * 1024, ge=0)


class StateSyncVersionConfig(BaseModel):
    enabled: bool = True
    version_delta_tolerance: int = Field(
        default=5000, ge=0, description="Allowed lag behind the baseline synced version"
    )


class NetworkPeersConfig(BaseModel):
    enabled: bool = True
    min_outbound_peers: int = Field(default=1, ge=0)


class TpsConfig(BaseModel):
    enabled: bool = False
    duration_secs: float = Field(default=10.0, gt=0)
    minimum_tps: float = Field(default=1.0, ge=0)


class LatencyConfig(BaseModel):
    enabled: bool = True
    num_samples: int = Field(default=5, ge=1)
    delay_between_samples_ms: int = Field(default=20, ge=0)
    max_failures: int = Field(default=2, ge=0)
    max_latency_ms: int = Field(default=1000, ge=1)


class EvaluatorsConfig(BaseModel):
    """
    Evaluator selection.

    Order of execution follows the field order below; the TPS evaluator
    always runs inside the metrics snapshot window.
    """

    state_sync_version: StateSyncVersionConfig = Field(default_factory=StateSyncVersionConfig)
    network_peers: NetworkPeersConfig = Field(default_factory=NetworkPeersConfig)
    build_version: BuildVersionConfig = Field(default_factory=BuildVersionConfig)
    hardware: HardwareConfig = Field(default_factory=HardwareConfig)
    tps: TpsConfig = Field(default_factory=TpsConfig)
    latency: LatencyConfig = Field(default_factory=LatencyConfig)


class LoggingConfig(BaseModel):
    """Logging settings."""

    console_level: Literal["debug", "info", "warning", "error"] = Field(
        default="info", description="Console log level"
    )
    file_level: Literal["debug", "info", "warning", "error"] = Field(
        default="debug", description="File log level"
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")
    json_logs: bool = Field(default=False, description="Write file logs as JSON lines")
    max_size_mb: int = Field(default=10, ge=1, le=100, description="Max log file size in MB")
    retention_days: int = Field(default=7, ge=1, le=90, description="Log retention in days")


class CheckerConfig(BaseModel):
    """Complete Node Checker configuration."""

    baseline: BaselineConfig
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    collector: CollectorConfig = Field(default_factory=CollectorConfig)
    evaluators: EvaluatorsConfig = Field(default_factory=EvaluatorsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
