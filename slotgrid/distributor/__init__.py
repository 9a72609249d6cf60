"""
Distributor Package
===================

Boundary between the matcher and a fleet distributor: registered slots
and the eligibility check run across them for each session request.
"""

from .evaluator import SlotEvaluator
from .models import Slot

__all__ = [
    "Slot",
    "SlotEvaluator",
]
