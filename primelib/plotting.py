"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_prime_counting(primes: np.ndarray, limit: int,
                        output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot pi(x) against the x / ln x approximation.

    Parameters
    ----------
    primes : np.ndarray
        Ascending primes <= limit (output of sieve).
    limit : int
        Upper end of the x axis.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    x = np.linspace(2, max(limit, 3), 500)
    pi_x = np.searchsorted(primes.astype(np.float64), x, side='right')

    ax.plot(x, pi_x, '-', label='pi(x)')
    ax.plot(x, x / np.log(x), '--', label='x / ln x')
    ax.set_xlabel('x')
    ax.set_ylabel('count')
    ax.set_title(f'Prime counting function up to {limit:,}')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_goldbach_min_prime(df: pd.DataFrame,
                            output_path: Optional[Path] = None) -> plt.Figure:
    """
    Scatter the minimal Goldbach prime p against n.

    Parameters
    ----------
    df : pd.DataFrame
        Columns n, p, q (one row per even n).
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    ax.scatter(df['n'], df['p'], s=2, alpha=0.5)
    ax.set_xlabel('n (even)')
    ax.set_ylabel('minimal p with p, n - p prime')
    ax.set_title('Minimal Goldbach prime')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
