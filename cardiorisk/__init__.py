"""
CardioRisk - Cardiovascular Risk Evaluation Engine

Validates and normalizes patient input, runs the applicable risk models
and returns a ranked, explainable assessment.
"""
__version__ = "0.1.0"
