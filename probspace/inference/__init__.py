"""Inference over discrete distributions for probspace."""

from probspace.inference.events import independent_events, probability_of_event
from probspace.inference.sampling import SimulationResults, simulate, simulate_many
from probspace.inference.statistics import (
    covariance,
    expectation,
    independent_variables,
    moment,
    standard_deviation,
    variance,
)

__all__ = [
    "SimulationResults",
    "covariance",
    "expectation",
    "independent_events",
    "independent_variables",
    "moment",
    "probability_of_event",
    "simulate",
    "simulate_many",
    "standard_deviation",
    "variance",
]
