"""Session lifecycle and page-object resolution for browser acceptance tests."""

from pageharness.scenario import ScenarioContext, after_scenario, before_scenario, scenario_session

__all__ = ["ScenarioContext", "after_scenario", "before_scenario", "scenario_session"]
