"""Per-scenario session context and before/after hooks."""

from pageharness.scenario.hooks import ScenarioContext, after_scenario, before_scenario, scenario_session

__all__ = ["ScenarioContext", "after_scenario", "before_scenario", "scenario_session"]
