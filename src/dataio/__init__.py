from .owid import OWID_COVID_CSV, load_owid_covid, select_locations, vaccinated_fraction
