from .correlations import (
    FlowConditions, CorrelationSet, resolve_correlation, oil_sg, water_viscosity,
    dead_oil_ift, gas_oil_ift, gas_water_ift,
    PseudoCriticalCorrelation, ZFactorCorrelation, GasViscosityCorrelation, BubblePointCorrelation,
    SolutionGORCorrelation, OilVolumeFactorCorrelation, WaterVolumeFactorCorrelation,
    DeadOilViscosityCorrelation, LiveOilViscosityCorrelation, FrictionFactorCorrelation, PressureGradientCorrelation,
    SuttonPseudoCritical, PiperMcCainPseudoCritical, HallYarboroughZ, DranchukAbouKassemZ, LeeGasViscosity,
    HankinsonWichertPseudoCritical, KareemZ,
    StandingBubblePoint, VasquezBeggsBubblePoint, StandingSolutionGOR, VasquezBeggsSolutionGOR,
    StandingOilVolumeFactor, GouldWaterVolumeFactor, GlasoDeadOilViscosity, BeggsRobinsonDeadOilViscosity,
    ChewConnallyLiveOilViscosity, BeggsRobinsonLiveOilViscosity, SerghideFrictionFactor, ChenFrictionFactor,
    BeggsAndBrill, HagedornAndBrown, GasColumn,
)
