from mingas.errors import ConfigurationError


class Cylinder:
    volume: int  # l

    def __init__(self, volume):
        if volume <= 0:
            raise ConfigurationError(f"cylinder volume must be positive, got {volume}")
        self.volume = volume

    @property
    def label(self):
        return f"{self.volume}l"

    def pressure_for(self, surface_volume):
        """Fill pressure in bar holding ``surface_volume`` liters of gas."""
        return surface_volume / self.volume

    def __repr__(self):
        return f"{self.volume} l cylinder"
