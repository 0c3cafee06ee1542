"""eTrack scraper — planning applications from TechnologyOne eTrack portals."""
