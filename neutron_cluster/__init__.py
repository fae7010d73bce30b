"""
neutron_cluster - Monte Carlo Neutron Clustering Demo

Point neutrons random-walk through a 2-D toroidal domain with constant
one-group cross sections:
  - free flight sampled from the exponential law
  - capture / fission / scatter collision outcomes
  - fission multiplication with stochastic rounding of nu

Fission lineages are tagged so the renderer can show how a critical
population clusters in space over time.
"""
__version__ = "0.1.0"
