import warnings

import numpy as np

from statsuite._numeric import errstate


def test_errstate_gives_ieee_results_silently():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with errstate():
            assert np.float64(1.0) / 0.0 == np.inf
            assert np.isnan(np.float64(0.0) / 0.0)
            assert np.isnan(np.sqrt(np.float64(-1.0)))
            assert np.exp(np.float64(1000.0)) == np.inf
