from types import MappingProxyType
from typing import List, Optional, Union

from torch import Tensor

from torchriemann.presets._catalog import INTEGRATION_PRESETS
from torchriemann.presets._preset import FunctionPreset
from torchriemann.quadrature import exact_integral

_PRESETS_BY_ID = MappingProxyType({p.id: p for p in INTEGRATION_PRESETS})


def lookup_preset(preset_id: str) -> Optional[FunctionPreset]:
    """Return the preset registered under ``preset_id``, or ``None``."""
    return _PRESETS_BY_ID.get(preset_id)


def preset_ids() -> List[str]:
    """Catalog keys in display order."""
    return [p.id for p in INTEGRATION_PRESETS]


def exact_integral_for_preset(
    preset_id: str,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Optional[Tensor]:
    """
    Exact integral of a preset over ``[a, b]``.

    Parameters
    ----------
    preset_id : str
        Catalog key.
    a, b : float or Tensor
        Integration bounds.

    Returns
    -------
    Tensor or None
        ``F(b) - F(a)`` for the preset's antiderivative ``F``, or ``None``
        if ``preset_id`` is not in the catalog.

    Examples
    --------
    >>> exact_integral_for_preset("sine", 0, torch.pi)
    tensor(2., dtype=torch.float64)
    >>> exact_integral_for_preset("missing", 0, 1) is None
    True
    """
    preset = lookup_preset(preset_id)
    if preset is None:
        return None
    return exact_integral(preset.antiderivative, a, b)
