from .constants import R, psc, tsc, degF2R, tscr, MW_AIR, CUFTperBBL, WDEN, AIRDEN, SEC_PER_DAY, GC, TC_N2, PC_N2
