from minilisp.evaluation.evaluator import evaluate, evaluate0
from minilisp.evaluation.apply import apply

__all__ = ["evaluate", "evaluate0", "apply"]
