"""CMOS-style power model for the simulated processor."""

from edfsim.config import (
    BASE_VOLTAGE,
    MAX_FREQUENCY,
    STATIC_POWER,
    SWITCHED_CAPACITANCE,
    VOLTAGE_SPAN,
)


class PowerModel:
    """
    Maps an operating frequency and a load ratio to instantaneous power.

    power = P_static + C * V^2 * f * ratio

    Voltage scales linearly with frequency, so the dynamic term grows
    faster than linearly as the frequency goes up. Frequency range is
    not validated here.
    """

    def __init__(
        self,
        static_power: float = STATIC_POWER,
        capacitance: float = SWITCHED_CAPACITANCE,
        base_voltage: float = BASE_VOLTAGE,
        voltage_span: float = VOLTAGE_SPAN,
        max_frequency: int = MAX_FREQUENCY,
    ):
        """
        Initialize power model constants.

        Args:
            static_power: Leakage power in Watts
            capacitance: Effective switched capacitance
            base_voltage: Voltage at zero frequency
            voltage_span: Voltage added between zero and max_frequency
            max_frequency: Frequency (MHz) at which voltage reaches its maximum
        """
        self.static_power = static_power
        self.capacitance = capacitance
        self.base_voltage = base_voltage
        self.voltage_span = voltage_span
        self.max_frequency = max_frequency

    def voltage(self, frequency: float) -> float:
        """Supply voltage for the given frequency in MHz."""
        return self.base_voltage + (frequency / self.max_frequency) * self.voltage_span

    def dynamic_power(self, frequency: float, ratio: float) -> float:
        """Dynamic (switching) component of the power draw."""
        voltage = self.voltage(frequency)
        return self.capacitance * voltage * voltage * frequency * ratio

    def calculate_power(self, frequency: float, ratio: float) -> float:
        """
        Compute instantaneous power draw.

        Args:
            frequency: Operating frequency in MHz
            ratio: Load ratio, normally in [0, 1]

        Returns:
            Power in Watts
        """
        return self.static_power + self.dynamic_power(frequency, ratio)

    def __repr__(self) -> str:
        return (
            f"PowerModel(static_power={self.static_power}, "
            f"capacitance={self.capacitance})"
        )


DEFAULT_POWER_MODEL = PowerModel()


def calculate_power(frequency: float, ratio: float) -> float:
    """Power draw under the default model constants."""
    return DEFAULT_POWER_MODEL.calculate_power(frequency, ratio)
