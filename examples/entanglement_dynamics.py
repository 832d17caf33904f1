#! /usr/bin/env python

import matplotlib.pyplot as plt
import numpy as np

from quantumutilities import dynamics, measures, plot
from quantumutilities.composite import tensor
from quantumutilities.liouville import lindbladian_superop
from quantumutilities.shared import setup_logging


def main(tmax=20.0):
    setup_logging()
    sx = np.array([[0, 1], [1, 0]]) / 2
    sz = np.array([[1, 0], [0, -1]]) / 2
    sm = np.array([[0, 0], [1, 0]])
    eye = np.eye(2)
    dims = (2, 2)

    # two spins with an exchange coupling, the first one decaying
    J = 1.0
    H = J * (tensor(sx, sx) + tensor(sz, sz)) + 0.3 * tensor(sz, eye)
    Ls = [tensor(sm, eye), tensor(sz, eye)]
    rates = [0.05, 0.02]
    L = lindbladian_superop(H, Ls, rates)

    time = np.linspace(0, tmax, 400)
    psi0 = tensor(np.array([1, 0]), np.array([0, 1]))
    rhos = dynamics.time_evolution(psi0, time, L)
    reduced = dynamics.reduced_time_evolution(rhos, 1, dims)

    entropy = [measures.von_neumann_entropy(rho, base=2) for rho in reduced]
    neg = [measures.negativity(rho, 2, dims) for rho in rhos]

    plt.figure(1)
    plt.plot(time, entropy, linewidth=2, label="$S(\\rho_2)$ / bit")
    plt.plot(time, neg, linewidth=2, label="Negativity")
    plt.xlabel("Time", size=14)
    plt.legend(fontsize=14)

    ax = plot.density_matrix(rhos[len(time) // 4], bar3d_kwargs={"alpha": 0.9})
    labels = plot.basis_labels(dims)
    ax.set_xticks(np.arange(4) + 0.5, labels)
    ax.set_yticks(np.arange(4) + 0.5, labels)
    plt.show()


if __name__ == "__main__":
    main()
