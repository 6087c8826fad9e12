"""Rolling z-score pair trader running against a two-symbol correlated exchange."""