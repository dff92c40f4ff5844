"""
Risk Model Coefficient Tables

Clinical coefficients are plain immutable lookup structures keyed by
demographic group, so a published equation update only touches this file.

The values are simplified approximations of the published equations and
have not been verified against the source papers term by term.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional
from enum import Enum
import math


# ---- Pooled Cohort Equations (2013 ACC/AHA) ----

class PceGroup(str, Enum):
    """Race/sex groups of the Pooled Cohort Equations."""
    WHITE_MALE = "white_male"
    WHITE_FEMALE = "white_female"
    BLACK_MALE = "black_male"
    BLACK_FEMALE = "black_female"


@dataclass(frozen=True)
class PceCoefficients:
    """One PCE group: 10-year risk = 1 - S10 ** exp(LP - mean LP)."""
    ln_age: float
    ln_age_sq: float
    ln_tc: float
    ln_age_ln_tc: float
    ln_hdl: float
    ln_age_ln_hdl: float
    ln_sbp_untreated: float
    ln_sbp_treated: float
    smoker: float
    diabetes: float
    mean_linear_predictor: float
    baseline_survival: float
    ln_age_ln_sbp_untreated: Optional[float] = None
    ln_age_ln_sbp_treated: Optional[float] = None

    @property
    def has_age_sbp_interaction(self) -> bool:
        return self.ln_age_ln_sbp_untreated is not None and self.ln_age_ln_sbp_treated is not None


PCE_COEFFICIENTS: Mapping[PceGroup, PceCoefficients] = MappingProxyType({
    PceGroup.WHITE_MALE: PceCoefficients(
        ln_age=12.344, ln_age_sq=0.0,
        ln_tc=11.853, ln_age_ln_tc=-2.664,
        ln_hdl=-7.990, ln_age_ln_hdl=1.769,
        ln_sbp_untreated=1.797, ln_sbp_treated=1.764,
        smoker=0.659, diabetes=0.573,
        mean_linear_predictor=61.18, baseline_survival=0.9144,
    ),
    PceGroup.WHITE_FEMALE: PceCoefficients(
        ln_age=-29.799, ln_age_sq=4.884,
        ln_tc=13.540, ln_age_ln_tc=-3.114,
        ln_hdl=-13.578, ln_age_ln_hdl=2.019,
        ln_sbp_untreated=2.020, ln_sbp_treated=1.981,
        smoker=0.654, diabetes=0.575,
        mean_linear_predictor=70.35, baseline_survival=0.9665,
    ),
    PceGroup.BLACK_MALE: PceCoefficients(
        ln_age=2.469, ln_age_sq=0.0,
        ln_tc=0.302, ln_age_ln_tc=0.0,
        ln_hdl=-0.307, ln_age_ln_hdl=0.0,
        ln_sbp_untreated=1.916, ln_sbp_treated=1.809,
        smoker=0.549, diabetes=0.645,
        mean_linear_predictor=19.54, baseline_survival=0.8954,
    ),
    PceGroup.BLACK_FEMALE: PceCoefficients(
        ln_age=17.114, ln_age_sq=0.0,
        ln_tc=0.940, ln_age_ln_tc=0.0,
        ln_hdl=-18.920, ln_age_ln_hdl=4.475,
        ln_sbp_untreated=29.291, ln_sbp_treated=27.820,
        ln_age_ln_sbp_untreated=-4.475, ln_age_ln_sbp_treated=-4.256,
        smoker=0.691, diabetes=0.874,
        mean_linear_predictor=86.61, baseline_survival=0.9533,
    ),
})


# ---- Framingham 10-year CHD (D'Agostino 2008) ----

@dataclass(frozen=True)
class FraminghamCoefficients:
    """Sex-specific Cox model: 10-year risk = 1 - S0 ** exp(sum(bX) - mean)."""
    ln_age: float
    ln_tc: float
    ln_hdl: float
    ln_sbp_untreated: float
    ln_sbp_treated: float
    smoker: float
    diabetes: float
    mean_linear_predictor: float
    baseline_survival: float


# Keyed by sex at birth value ("male"/"female")
FRAMINGHAM_COEFFICIENTS: Mapping[str, FraminghamCoefficients] = MappingProxyType({
    "male": FraminghamCoefficients(
        ln_age=3.06117, ln_tc=1.1237, ln_hdl=-0.93263,
        ln_sbp_untreated=1.93303, ln_sbp_treated=1.99881,
        smoker=0.65451, diabetes=0.57367,
        mean_linear_predictor=23.9802, baseline_survival=0.88936,
    ),
    "female": FraminghamCoefficients(
        ln_age=2.32888, ln_tc=1.20904, ln_hdl=-0.70833,
        ln_sbp_untreated=2.76157, ln_sbp_treated=2.82263,
        smoker=0.52873, diabetes=0.69154,
        mean_linear_predictor=26.1931, baseline_survival=0.95012,
    ),
})


# ---- WHO CVD risk charts (Lancet Glob Health 2019) ----

class WhoRegion(str, Enum):
    """The 21 Global Burden of Disease regions of the WHO charts."""
    ANDEAN_LATIN_AMERICA = "andean_latin_america"
    AUSTRALASIA = "australasia"
    CARIBBEAN = "caribbean"
    CENTRAL_ASIA = "central_asia"
    CENTRAL_EUROPE = "central_europe"
    CENTRAL_LATIN_AMERICA = "central_latin_america"
    EAST_ASIA = "east_asia"
    EASTERN_EUROPE = "eastern_europe"
    NORTH_AFRICA_MIDDLE_EAST = "north_africa_middle_east"
    NORTH_AMERICA_HIGH_INCOME = "north_america_high_income"
    OCEANIA = "oceania"
    SOUTH_ASIA = "south_asia"
    SOUTHEAST_ASIA = "southeast_asia"
    SOUTHERN_LATIN_AMERICA = "southern_latin_america"
    SUBSAHARAN_AFRICA_CENTRAL = "subsaharan_africa_central"
    SUBSAHARAN_AFRICA_EAST = "subsaharan_africa_east"
    SUBSAHARAN_AFRICA_SOUTHERN = "subsaharan_africa_southern"
    SUBSAHARAN_AFRICA_WEST = "subsaharan_africa_west"
    TROPICAL_LATIN_AMERICA = "tropical_latin_america"
    WESTERN_EUROPE = "western_europe"
    HIGH_INCOME_ASIA_PACIFIC = "high_income_asia_pacific"


DEFAULT_WHO_REGION = WhoRegion.NORTH_AMERICA_HIGH_INCOME

WHO_REGION_CALIBRATION: Mapping[WhoRegion, float] = MappingProxyType({
    WhoRegion.ANDEAN_LATIN_AMERICA: 0.7,
    WhoRegion.AUSTRALASIA: 0.9,
    WhoRegion.CARIBBEAN: 1.0,
    WhoRegion.CENTRAL_ASIA: 1.35,
    WhoRegion.CENTRAL_EUROPE: 1.1,
    WhoRegion.CENTRAL_LATIN_AMERICA: 0.85,
    WhoRegion.EAST_ASIA: 0.75,
    WhoRegion.EASTERN_EUROPE: 1.2,
    WhoRegion.NORTH_AFRICA_MIDDLE_EAST: 1.15,
    WhoRegion.NORTH_AMERICA_HIGH_INCOME: 1.0,
    WhoRegion.OCEANIA: 1.05,
    WhoRegion.SOUTH_ASIA: 1.1,
    WhoRegion.SOUTHEAST_ASIA: 0.9,
    WhoRegion.SOUTHERN_LATIN_AMERICA: 0.85,
    WhoRegion.SUBSAHARAN_AFRICA_CENTRAL: 0.8,
    WhoRegion.SUBSAHARAN_AFRICA_EAST: 0.75,
    WhoRegion.SUBSAHARAN_AFRICA_SOUTHERN: 0.9,
    WhoRegion.SUBSAHARAN_AFRICA_WEST: 0.8,
    WhoRegion.TROPICAL_LATIN_AMERICA: 0.85,
    WhoRegion.WESTERN_EUROPE: 0.95,
    WhoRegion.HIGH_INCOME_ASIA_PACIFIC: 0.85,
})

# Centering of the WHO linear predictors
WHO_AGE_CENTER = 60.0
WHO_AGE_SCALE = 5.0
WHO_SBP_CENTER = 120.0
WHO_SBP_SCALE = 20.0
WHO_TC_CENTER_MMOLL = 6.0
WHO_BMI_CENTER = 25.0


@dataclass(frozen=True)
class WhoOutcomeCoefficients:
    """
    Log hazard ratios for one outcome (CHD or stroke).

    Lab models use cholesterol (per mmol/L) and diabetes; non-lab models
    use BMI (per kg/m2) and ignore diabetes.
    """
    age: float
    smoker: float
    sbp: float
    diabetes: float = 0.0
    cholesterol: float = 0.0
    bmi: float = 0.0


@dataclass(frozen=True)
class WhoModel:
    chd: WhoOutcomeCoefficients
    stroke: WhoOutcomeCoefficients


LN = math.log

# Keyed by sex at birth value
WHO_LAB_MODELS: Mapping[str, WhoModel] = MappingProxyType({
    "male": WhoModel(
        chd=WhoOutcomeCoefficients(age=LN(1.43), smoker=LN(1.76), sbp=LN(1.3), diabetes=LN(1.9), cholesterol=LN(1.26)),
        stroke=WhoOutcomeCoefficients(age=LN(1.64), smoker=LN(1.65), sbp=LN(1.56), diabetes=LN(1.87), cholesterol=LN(1.03)),
    ),
    "female": WhoModel(
        chd=WhoOutcomeCoefficients(age=LN(1.67), smoker=LN(2.87), sbp=LN(1.37), diabetes=LN(2.92), cholesterol=LN(1.23)),
        stroke=WhoOutcomeCoefficients(age=LN(1.7), smoker=LN(2.11), sbp=LN(1.51), diabetes=LN(2.36), cholesterol=LN(1.03)),
    ),
})

WHO_NON_LAB_MODELS: Mapping[str, WhoModel] = MappingProxyType({
    "male": WhoModel(
        chd=WhoOutcomeCoefficients(age=LN(1.44), smoker=LN(1.81), sbp=LN(1.31), bmi=LN(1.18)),
        stroke=WhoOutcomeCoefficients(age=LN(1.63), smoker=LN(1.65), sbp=LN(1.58), bmi=LN(1.08)),
    ),
    "female": WhoModel(
        chd=WhoOutcomeCoefficients(age=LN(1.69), smoker=LN(2.98), sbp=LN(1.4), bmi=LN(1.14)),
        stroke=WhoOutcomeCoefficients(age=LN(1.69), smoker=LN(2.1), sbp=LN(1.54), bmi=LN(1.02)),
    ),
})

# 10-year baseline survival at the centering profile, (chd, stroke) by sex
WHO_BASELINE_SURVIVAL: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "male": MappingProxyType({"chd": 0.954, "stroke": 0.985}),
    "female": MappingProxyType({"chd": 0.989, "stroke": 0.989}),
})
