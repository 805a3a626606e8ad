"""
Physical constants and default run settings.
"""
import scipy.constants as SI

SPEED_OF_LIGHT = SI.c  # m/s
ELECTRON_MASS = SI.m_e  # kg

N_TRACE_DEFAULT = 2000

DEFAULT_CONFIG = {
    'physics': {
        'speed_of_light': SPEED_OF_LIGHT,
        'rest_mass': ELECTRON_MASS,
    },
    'spectrum': {
        'omega_max': 3.0e19,        # maximum plotted frequency, Hz
        'theta_max': 1.14594939,    # maximum of first angle theta, degree
        'n_spectrum': 2048,         # number of frequencies omega
        'n_theta': 120,             # directions in first angle theta
        'n_phi': 2,                 # directions in second angle phi
        'n_trace': N_TRACE_DEFAULT, # maximum number of traces
        'fft_length_factor': 1,
        'index_files_first': 0,
        'index_files_last': N_TRACE_DEFAULT,
    },
}
