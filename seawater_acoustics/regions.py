from seawater_acoustics.tools.validation import parse_selector, warn_domain
from dataclasses import dataclass
from enum import Enum
import numpy as np

class Region(Enum):
    '''Oceans and seas with their own depth/pressure correction
    in Leroy & Parthiot (1998).'''
    COMMON_OCEANS = 0
    NORTH_EAST_ATLANTIC = 1
    CIRCUMPOLAR_ANTARCTIC = 2
    MEDITERRANEAN_SEA = 3
    RED_SEA = 4
    ARCTIC_OCEAN = 5
    SEA_OF_JAPAN = 6
    SULU_SEA = 7
    HALMAHERA_BASIN = 8
    CELEBES_BASIN = 9
    WEBER_DEEP = 10
    BLACK_SEA = 11
    BALTIC_SEA = 12

class Leroy1968Region(Enum):
    COMMON_OCEANS = 0
    BLACK_SEA = 1
    BALTIC_SEA = 2

@dataclass
class RegionInfo:
    region: Region
    name: str
    lat_range: list
    pressure_std: float # [dbar]
    depth_std: float # [m]

common_oceans = RegionInfo(Region.COMMON_OCEANS, 'Common Oceans', [-40., 60.], 0.8, 0.8)
north_east_atlantic = RegionInfo(Region.NORTH_EAST_ATLANTIC, 'North East Atlantic', [30., 35.], 0.3, 0.3)
circumpolar_antarctic = RegionInfo(Region.CIRCUMPOLAR_ANTARCTIC, 'Circumpolar Antarctic', [-90., -66.6], 0.1, 0.1)
mediterranean_sea = RegionInfo(Region.MEDITERRANEAN_SEA, 'Mediterranean Sea', [30., 46.], 0.2, 0.2)
red_sea = RegionInfo(Region.RED_SEA, 'Red Sea', [12., 30.], 0.2, 0.2)
arctic_ocean = RegionInfo(Region.ARCTIC_OCEAN, 'Arctic Ocean', [66.6, 90.], 0.1, 0.1)
sea_of_japan = RegionInfo(Region.SEA_OF_JAPAN, 'Sea of Japan', [33., 53.], 0.1, 0.1)
sulu_sea = RegionInfo(Region.SULU_SEA, 'Sulu Sea', [5., 13.], 0.1, 0.2) # pressure std < 0.1
halmahera_basin = RegionInfo(Region.HALMAHERA_BASIN, 'Halmahera Basin', [-3., 3.], 0.1, 0.1) # pressure std < 0.1
celebes_basin = RegionInfo(Region.CELEBES_BASIN, 'Celebes Basin', [1., 8.], 0.2, 0.4)
weber_deep = RegionInfo(Region.WEBER_DEEP, 'Weber Deep', [-8., -3.], 0.2, 0.4)
black_sea = RegionInfo(Region.BLACK_SEA, 'Black Sea', [41., 47.], 0.1, 0.1)
baltic_sea = RegionInfo(Region.BALTIC_SEA, 'Baltic Sea', [53., 63.], 0.1, 0.1)

all_regions = [common_oceans, north_east_atlantic, circumpolar_antarctic, mediterranean_sea,
               red_sea, arctic_ocean, sea_of_japan, sulu_sea, halmahera_basin,
               celebes_basin, weber_deep, black_sea, baltic_sea]

def get_region_info(region) -> RegionInfo:
    '''Accepts a Region, its number (0-12) or its name (e.g. 'black_sea').'''
    region = parse_selector(Region, region, 'region')
    for info in all_regions:
        if info.region is region:
            return info
    raise ValueError(f'No region info for {region}')

def check_region_latitude(region, lat, log_file=None) -> bool:
    '''Warns (and never raises) if any latitude falls outside the band of
    the region. Returns True if all latitudes are inside it.'''
    info = get_region_info(region)
    lat = np.asarray(lat, dtype=float)
    lat_min, lat_max = info.lat_range
    outside = ~((lat > lat_min) & (lat < lat_max))
    if np.any(outside):
        warn_domain(f'Latitude outside the limits of {info.name} ({lat_min} to {lat_max} deg) '
                    f'for {np.count_nonzero(outside)} values. Check the region and latitude.', log_file)
        return False
    return True
