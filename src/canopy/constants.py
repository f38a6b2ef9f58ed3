from scipy import constants

R = constants.R  # [J/(mol K)] universal gas constant

atm = constants.atm  # [Pa] standard atmosphere

T_0 = constants.zero_Celsius  # [K] 0 degC
