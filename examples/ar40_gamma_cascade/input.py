import dexcite

# =============================================================================
# Decay scheme
# =============================================================================
# Low-lying levels of 40Ar and their gamma-ray branches (relative intensities)

scheme = dexcite.DecayScheme(
    "40Ar", pdg=1000180400, gs_mass=dexcite.nucleus_mass(18, 40, -35.0398), Z=18
)

l0 = scheme.add_level(0.0, 0, +1)  # 0+
l1 = scheme.add_level(1.4608, 4, +1)  # 2+
l2 = scheme.add_level(2.1210, 4, +1)  # 2+
l3 = scheme.add_level(2.5240, 0, +1)  # 0+
l4 = scheme.add_level(2.8925, 8, +1)  # 4+

scheme.add_gamma(l1, l0, 1.0)
scheme.add_gamma(l2, l1, 0.7)
scheme.add_gamma(l2, l0, 0.3)
scheme.add_gamma(l3, l1, 1.0)
scheme.add_gamma(l4, l1, 1.0)

# =============================================================================
# Sources
# =============================================================================
# Populated states after, e.g., a charged-current reaction

dexcite.Source(scheme, Ex=2.1210, two_J=4, parity=+1, probability=0.6)
dexcite.Source(scheme, Ex=2.8925, two_J=8, parity=+1, probability=0.4)

# =============================================================================
# Set settings and run
# =============================================================================

dexcite.settings.N_event = 1000
dexcite.settings.save_hepevt = True
dexcite.run()
