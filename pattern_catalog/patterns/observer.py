"""
Observer pattern: a weather station and its displays.

The station (subject) keeps a list of displays (observers) and pushes every
new set of measurements to each of them, in registration order.
"""

from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.registry import PatternCategory, demo


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        """Receive new measurements."""


class Subject(ABC):
    @abstractmethod
    def register_observer(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def remove_observer(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def notify_observers(self) -> None:
        pass


class WeatherStation(Subject):
    def __init__(self) -> None:
        self._observers: List[Observer] = []
        self.temperature = 0.0
        self.humidity = 0.0
        self.pressure = 0.0

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def register_observer(self, observer: Observer) -> None:
        self._observers.append(observer)
        print("Observer registered")

    def remove_observer(self, observer: Observer) -> None:
        """Stop notifying ``observer``; unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)
        print("Observer removed")

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self.temperature, self.humidity, self.pressure)

    def set_measurements(
        self, temperature: float, humidity: float, pressure: float
    ) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.pressure = pressure
        self.notify_observers()


class CurrentConditionsDisplay(Observer):
    def __init__(self) -> None:
        self.temperature = 0.0
        self.humidity = 0.0

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.display()

    def display(self) -> None:
        print(
            f"Current conditions: {self.temperature}°C "
            f"and {self.humidity}% humidity"
        )


class StatisticsDisplay(Observer):
    """Running average, maximum and minimum of the temperature."""

    def __init__(self) -> None:
        self.max_temp = 0.0
        self.min_temp = 200.0
        self._temp_sum = 0.0
        self.num_readings = 0

    @property
    def average(self) -> float:
        if not self.num_readings:
            return 0.0
        return self._temp_sum / self.num_readings

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self._temp_sum += temperature
        self.num_readings += 1
        self.max_temp = max(self.max_temp, temperature)
        self.min_temp = min(self.min_temp, temperature)
        self.display()

    def display(self) -> None:
        print(
            f"Avg/Max/Min temperature: {self.average}"
            f"/{self.max_temp}/{self.min_temp}"
        )


class ForecastDisplay(Observer):
    """Guesses the weather from the pressure trend."""

    def __init__(self) -> None:
        self.current_pressure = 29.92
        self.last_pressure = 0.0

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.last_pressure = self.current_pressure
        self.current_pressure = pressure
        self.display()

    def forecast(self) -> str:
        if self.current_pressure > self.last_pressure:
            return "Improving weather on the way!"
        if self.current_pressure == self.last_pressure:
            return "More of the same"
        return "Watch out for cooler, rainy weather"

    def display(self) -> None:
        print(f"Forecast: {self.forecast()}")


@demo(
    name="observer",
    category=PatternCategory.BEHAVIORAL,
    description="A weather station pushes measurements to three displays.",
)
def main() -> None:
    """Register three displays and publish three rounds of measurements."""
    weather_station = WeatherStation()

    weather_station.register_observer(CurrentConditionsDisplay())
    weather_station.register_observer(StatisticsDisplay())
    weather_station.register_observer(ForecastDisplay())

    print("\n--- First measurements ---")
    weather_station.set_measurements(25.5, 65.0, 30.4)

    print("\n--- Second measurements ---")
    weather_station.set_measurements(27.8, 70.0, 29.2)

    print("\n--- Third measurements ---")
    weather_station.set_measurements(23.3, 90.0, 29.5)


if __name__ == "__main__":
    main()
