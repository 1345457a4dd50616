from medrecords.views.patient_list import PatientListView, filter_patients, matches_search
from medrecords.views.patient_detail import PatientDetailView, PatientOverview, TABS, TAB_TABLES

__all__ = ["PatientListView", "PatientDetailView", "PatientOverview", "filter_patients",
           "matches_search", "TABS", "TAB_TABLES"]
