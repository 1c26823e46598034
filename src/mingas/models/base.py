import abc


class GasModel(abc.ABC):
    name: str

    @abc.abstractmethod
    def required_gas(self, depth: float, breathing_rate: float) -> float:
        raise NotImplementedError

    def __repr__(self):
        return f"{self.name} model"
