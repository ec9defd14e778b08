"""Named scenario perturbations used by the sensitivity analysis."""
