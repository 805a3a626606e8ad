#!/usr/bin/env python3
"""
Undulator Trace Example

This script builds the momentum history of an electron oscillating in a
planar undulator and samples gamma, beta and d(beta)/dt along it using the
radkin package.
"""

import numpy as np
import scipy.constants as SI

from radkin import Trace, TraceSampler, ConfigManager

def main():
    config = ConfigManager()

    # Electron at gamma ~ 100 wiggling in x with deflection parameter K = 1
    gamma0 = 100.0
    K = 1.0
    period = 0.02  # undulator period in m
    mc = SI.m_e * SI.c
    p_z = mc * np.sqrt(gamma0**2 - 1.0 - K**2 / 2)

    omega_u = 2 * np.pi * SI.c / period
    times = np.linspace(0.0, 5 * period / SI.c, 2001)
    momenta = np.zeros((len(times), 3))
    momenta[:, 0] = K * mc * np.cos(omega_u * times)
    momenta[:, 2] = p_z

    print("Sampling trace...")
    trace = Trace(times=times, momenta=momenta)
    sampler = TraceSampler.from_config(trace, config)
    hist = sampler.history(progress=True)

    print(f"Steps: {hist.n_steps}")
    print(f"gamma: {hist.gamma.min():.4f} .. {hist.gamma.max():.4f}")
    print(f"max |beta|: {np.linalg.norm(hist.beta, axis=1).max():.8f}")
    print(f"max |d(beta)/dt|: {np.linalg.norm(hist.beta_dot, axis=1).max():.4e} 1/s")

if __name__ == "__main__":
    main()
