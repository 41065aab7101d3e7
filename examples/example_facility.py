"""Example: Building a cinema, saving it and loading it back."""

from datetime import datetime, timedelta

from dotenv import load_dotenv

from cinema_facility import (
    CleanableArea,
    CleaningAssignment,
    Employee,
    Floor,
    PartTimeContract,
    Registry,
    Settings,
    WCType,
)

# Load CINEMA_* settings from .env file
load_dotenv()

registry = Registry(Settings.from_env())

print("=== Building the cinema ===\n")
ground = Floor(0, registry=registry)
hall = ground.add_hall(1)
for number in range(1, 6):
    hall.add_seat(number, "A")
ground.add_wc(WCType.MEN)
ground.add_wc(WCType.WOMEN)
print(f"{ground.description}: {len(ground.halls)} hall(s), {len(ground.wcs)} WC(s)")
print(f"{hall} holds {len(hall.seats)} seats")

print("\n=== Cleaning ===\n")
cleaner = Employee("Ada", "Nowak", registry=registry)
PartTimeContract(20, cleaner)
CleaningAssignment(cleaner, hall, datetime.now() - timedelta(hours=1))
for area in CleanableArea.areas_to_clean(registry):
    print(f"Needs cleaning: {area.description}")

print("\n=== Saving and loading ===\n")
path = Floor.save(registry=registry)
print(f"Saved floors to {path}")

ground.delete()
print(f"Floors after delete: {len(Floor.extent(registry))}")

result = Floor.load(registry=registry)
if not result:
    print(f"Error: {result.error}")
    exit(1)
print(f"Loaded {result.loaded} floor(s) from {result.path}")

print("\n=== Done ===")
