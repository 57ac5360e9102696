"""Example usage of the probform package.

This example demonstrates the core features of the probform package including:
- Evaluating the Logistic PDF, CDF and moments with free functions
- The Logistic class and its quantile function
- Inspecting parameter domains and handling DomainError
- Using the EvaluationContext context manager
"""

from probform import (
    DomainError,
    EvaluationContext,
    Logistic,
    logistic,
)
import numpy as np


def free_functions_example():
    """Demonstrate the logistic module functions."""
    print("=" * 60)
    print("Logistic Free Functions Example")
    print("=" * 60)

    print("\n1. Standard Logistic (mu=0, s=1)")
    print(f"   PDF at 0: {logistic.pdf(0, 0, 1):.4f}")
    print(f"   CDF at 0: {logistic.cdf(0, 0, 1):.4f}")
    print(f"   Mean: {logistic.mean(0, 1)}")
    print(f"   Variance: {logistic.variance(0, 1):.4f}")

    print("\n2. Shifted and scaled (mu=3.2, s=1.5)")
    print(f"   PDF at 4: {logistic.pdf(4, 3.2, 1.5):.4f}")
    print(f"   CDF at 4: {logistic.cdf(4, 3.2, 1.5):.4f}")
    print(f"   Mean: {logistic.mean(3.2, 1.5)}")


def class_example():
    """Demonstrate the Logistic class."""
    print("\n" + "=" * 60)
    print("Logistic Class Example")
    print("=" * 60)

    dist = Logistic(mu=1.0, s=0.5)
    print(f"\n   {dist!r}")
    print(f"   Median: {dist.median()}")
    print(f"   Std: {dist.std():.4f}")
    print(f"   95% interval: ({dist.quantile(0.025):.3f}, {dist.quantile(0.975):.3f})")


def limits_example():
    """Demonstrate parameter domains and domain errors."""
    print("\n" + "=" * 60)
    print("Parameter Domains Example")
    print("=" * 60)

    print("\nDeclared domains:")
    for name, interval in Logistic.limits().items():
        print(f"   {name} ∈ {interval}")

    print("\nRejected arguments:")
    for args in [(0, 0, 0), (0, 0, -1), (float("nan"), 0, 1)]:
        try:
            logistic.pdf(*args)
        except DomainError as exc:
            print(f"   pdf{args}: {exc}")


def context_manager_example():
    """Demonstrate EvaluationContext."""
    print("\n" + "=" * 60)
    print("EvaluationContext Example")
    print("=" * 60)

    print(f"\n   Default: cdf(-1000, 0, 1) = {logistic.cdf(-1000, 0, 1)}")
    with EvaluationContext(fp_errors="raise"):
        print(f"   Context active: {EvaluationContext.is_active()}")
        try:
            logistic.cdf(-1000, 0, 1)
        except FloatingPointError as exc:
            print(f"   With fp_errors='raise': {exc}")

    print(f"\nAfter exiting context:")
    print(f"   Context active: {EvaluationContext.is_active()}")


def vectorized_operations_example():
    """Demonstrate vectorized operations."""
    print("\n" + "=" * 60)
    print("Vectorized Operations Example")
    print("=" * 60)

    dist = Logistic(0, 1)
    x = np.array([-2, -1, 0, 1, 2])

    print("\n1. Vectorized PDF")
    print(f"   x: {x}")
    print(f"   PDF(x): {dist.pdf(x)}")

    print("\n2. Vectorized CDF")
    print(f"   x: {x}")
    print(f"   CDF(x): {dist.cdf(x)}")

    print("\n3. Vectorized Quantiles")
    q = np.array([0.025, 0.25, 0.5, 0.75, 0.975])
    print(f"   q: {q}")
    print(f"   Quantile(q): {dist.quantile(q)}")


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("probform Package Examples")
    print("=" * 60)

    free_functions_example()
    class_example()
    limits_example()
    context_manager_example()
    vectorized_operations_example()

    print("\n" + "=" * 60)
    print("Examples completed successfully!")
    print("=" * 60 + "\n")
