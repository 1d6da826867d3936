"""Air Quality Index (AQI) constants based on EPA standards.

This module contains the concentration breakpoints and corresponding AQI values
for the pollutants monitored by the device, according to the US EPA Air
Quality Index. Every table has one (low, high) row per AQI category, in the
same order as ``AQI_BREAKS``.

References:
    - EPA AQI Technical Assistance Document: https://www.airnow.gov/aqi/aqi-basics/
    - EPA AQI Breakpoints: https://www.airnow.gov/sites/default/files/2020-05/aqi-technical-assistance-document-sept2018.pdf
"""

# All tables need to have the same number of rows
BREAK_COUNT = 7

# AQI category ranges shared by every pollutant table
AQI_BREAKS = [
    (0, 50),
    (51, 100),
    (101, 150),
    (151, 200),
    (201, 300),
    (301, 400),
    (401, 500),
]

# EPA category names, index-aligned with AQI_BREAKS
AQI_CATEGORIES = [
    "Good",
    "Moderate",
    "Unhealthy for Sensitive Groups",
    "Unhealthy",
    "Very Unhealthy",
    "Hazardous",
    "Hazardous",
]

# PM2.5 (Fine Particulate Matter, µg/m³)
# Breakpoints for 24-hour average PM2.5 concentrations
PM25_BREAKS = [
    (0.0, 12.0),
    (12.1, 35.4),
    (35.5, 55.4),
    (55.5, 150.4),
    (150.5, 250.4),
    (250.5, 350.4),
    (350.5, 500.4),
]

# PM10 (Coarse Particulate Matter, µg/m³)
# Breakpoints for 24-hour average PM10 concentrations
PM10_BREAKS = [
    (0, 54),
    (55, 154),
    (155, 254),
    (255, 354),
    (355, 424),
    (425, 504),
    (505, 604),
]

# O3 (Ozone, ppm)
# Breakpoints for 8-hour average ozone concentrations. The EPA table stops at
# 0.200 ppm; the last two rows are not defined by EPA and are never reached
# because 8-hour values above 0.200 ppm are evaluated on the 1-hour table.
O3_8H_BREAKS = [
    (0.000, 0.054),
    (0.055, 0.070),
    (0.071, 0.085),
    (0.086, 0.105),
    (0.106, 0.200),
    (0.405, 0.504),
    (0.505, 0.604),
]

# O3 (Ozone, ppm)
# Breakpoints for 1-hour average ozone concentrations. EPA starts this table
# at 0.125 ppm; the first two rows reuse the 8-hour values.
O3_1H_BREAKS = [
    (0.000, 0.054),
    (0.055, 0.124),
    (0.125, 0.164),
    (0.165, 0.204),
    (0.205, 0.404),
    (0.405, 0.504),
    (0.505, 0.604),
]

# CO (Carbon Monoxide, ppm)
# Breakpoints for 8-hour average CO concentrations
CO_BREAKS = [
    (0.0, 4.4),
    (4.5, 9.4),
    (9.5, 12.4),
    (12.5, 15.4),
    (15.5, 30.4),
    (30.5, 40.4),
    (40.5, 50.4),
]

# SO2 (Sulfur Dioxide, ppb)
# Breakpoints for 1-hour average SO2 concentrations
SO2_BREAKS = [
    (0, 35),
    (36, 75),
    (76, 185),
    (186, 304),
    (305, 604),
    (605, 804),
    (805, 1004),
]

# NO2 (Nitrogen Dioxide, ppb)
# Breakpoints for 1-hour average NO2 concentrations
NO2_BREAKS = [
    (0, 53),
    (54, 100),
    (101, 360),
    (361, 649),
    (650, 1249),
    (1250, 1649),
    (1650, 2049),
]
