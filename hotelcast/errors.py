"""Configuration and stability errors raised by the engine"""


class ModelConfigError(ValueError):
    """Raised when model inputs cannot produce meaningful results"""


class UnstableQueueError(ModelConfigError):
    """Raised when a stage's utilization is at or above 1 (no steady state)"""

    def __init__(self, stage: str, lam: float, mu: float, c: int):
        self.stage = stage
        self.lam = lam
        self.mu = mu
        self.c = c
        self.rho = lam / (c * mu)
        super().__init__(
            f"Model unstable at {stage}: rho={self.rho:.3f} "
            f"(lambda={lam:.4f}/min, mu={mu:.4f}/min, c={c})"
        )
