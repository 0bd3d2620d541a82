"""Shared dependencies for API routes."""

from services.pipeline.stage_registry import get_stage


def get_estimator():
    return get_stage("s1_severance_estimator")
