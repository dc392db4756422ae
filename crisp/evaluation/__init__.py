from crisp.evaluation.evaluator import evaluate
from crisp.evaluation.apply import apply, apply_lambda

__all__ = ("evaluate", "apply", "apply_lambda")
