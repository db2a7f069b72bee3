"""Typed models for the Graylog2 REST API responses the check consumes."""

from typing import List, Optional

from pydantic import BaseModel, Field


class SystemStatus(BaseModel):
    """GET /system"""
    is_processing: bool
    lifecycle: str
    lb_status: str
    hostname: Optional[str] = None
    version: Optional[str] = None
    node_id: Optional[str] = None
    cluster_id: Optional[str] = None


class IndexerFailures(BaseModel):
    """GET /system/indexer/failures"""
    total: int


class Throughput(BaseModel):
    """GET /system/throughput"""
    throughput: float


class InputsSummary(BaseModel):
    """GET /system/inputs"""
    total: int


class EventCount(BaseModel):
    """GET /count/total"""
    events: int


class CollectorStatus(BaseModel):
    """Health reported by a collector: 0=running, 1=unknown, 2=failing."""
    status: int
    message: Optional[str] = None


class CollectorNodeDetails(BaseModel):
    """Node details attached to a collector registration."""
    operating_system: Optional[str] = None
    status: Optional[CollectorStatus] = None


class Collector(BaseModel):
    """Single collector registration."""
    active: bool
    id: Optional[str] = None
    node_id: Optional[str] = None
    node_details: Optional[CollectorNodeDetails] = None

    @property
    def status_code(self) -> Optional[int]:
        """Reported status code, None if the collector sent none."""
        if self.node_details is None or self.node_details.status is None:
            return None
        return self.node_details.status.status


class CollectorList(BaseModel):
    """GET /plugins/org.graylog.plugins.collector/collectors"""
    collectors: List[Collector] = Field(default_factory=list)
