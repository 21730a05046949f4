"""Seed data for NYC subway stations and station complexes.

Data sourced from MTA GTFS feeds.
"""

# Multi-station complexes
# Format: name, borough
COMPLEXES_DATA = [
    # Manhattan (18)
    ("168 St", "Manhattan"),
    ("59 St-Columbus Circle", "Manhattan"),
    ("Lexington Av/59 St", "Manhattan"),
    ("51 St / Lexington Av-53 St", "Manhattan"),
    ("Times Sq-42 St / 42 St-Port Authority", "Manhattan"),
    ("42 St-Bryant Park / 5 Av", "Manhattan"),
    ("Grand Central-42 St", "Manhattan"),
    ("34 St-Herald Sq", "Manhattan"),
    ("14 St / 8 Av", "Manhattan"),
    ("14 St / 6 Av", "Manhattan"),
    ("14 St-Union Sq", "Manhattan"),
    ("Bleecker St / Broadway-Lafayette St", "Manhattan"),
    ("Delancey St-Essex St", "Manhattan"),
    ("Canal St", "Manhattan"),
    ("Chambers St / Brooklyn Bridge-City Hall", "Manhattan"),
    ("Fulton St / Park Pl / Cortlandt St", "Manhattan"),
    ("Fulton St", "Manhattan"),
    ("Whitehall St-South Ferry / South Ferry", "Manhattan"),

    # Bronx (2)
    ("161 St-Yankee Stadium", "Bronx"),
    ("149 St-Grand Concourse", "Bronx"),

    # Queens (2)
    ("Court Sq / Court Sq-23 St", "Queens"),
    ("Jackson Hts-Roosevelt Av / 74 St-Broadway", "Queens"),

    # Brooklyn (10)
    ("Lorimer St / Metropolitan Av", "Brooklyn"),
    ("Myrtle-Wyckoff Avs", "Brooklyn"),
    ("Court St / Borough Hall", "Brooklyn"),
    ("Jay St-MetroTech", "Brooklyn"),
    ("Atlantic Av-Barclays Ctr", "Brooklyn"),
    ("Franklin Av", "Brooklyn"),
    ("Broadway Junction", "Brooklyn"),
    ("4 Av-9 St", "Brooklyn"),
    ("Franklin Av / Botanic Garden", "Brooklyn"),
    ("New Utrecht Av / 62 St", "Brooklyn"),
]


# Format: name, lines, lat, lon, borough, complex name
STATIONS_DATA = [
    # MANHATTAN STATIONS
    # IRT Broadway-Seventh Avenue Line (1/2/3)
    ("South Ferry", ["1"], 40.701411, -74.013042, "Manhattan", "Whitehall St-South Ferry / South Ferry"),
    ("Rector St", ["1"], 40.707513, -74.013783, "Manhattan", None),
    ("City Hall", ["R", "W"], 40.713282, -74.006978, "Manhattan", None),
    ("WTC Cortlandt", ["1"], 40.711835, -74.011029, "Manhattan", None),
    ("Chambers St", ["1", "2", "3"], 40.715478, -74.009266, "Manhattan", None),
    ("Franklin St", ["1"], 40.719318, -74.006886, "Manhattan", None),
    ("Canal St", ["1"], 40.722854, -74.005327, "Manhattan", None),
    ("Houston St", ["1"], 40.728251, -74.002353, "Manhattan", None),
    ("Christopher St-Stonewall", ["1"], 40.733422, -74.002906, "Manhattan", None),
    ("14 St", ["1", "2", "3"], 40.737826, -74.000201, "Manhattan", "14 St / 6 Av"),
    ("18 St", ["1"], 40.741040, -73.997871, "Manhattan", None),
    ("23 St", ["1"], 40.744081, -73.995657, "Manhattan", None),
    ("28 St", ["1"], 40.747215, -73.993365, "Manhattan", None),
    ("34 St-Penn Station", ["1", "2", "3"], 40.750373, -73.991057, "Manhattan", None),
    ("Times Sq-42 St", ["1", "2", "3"], 40.754672, -73.986754, "Manhattan", "Times Sq-42 St / 42 St-Port Authority"),
    ("Times Sq-42 St", ["7"], 40.754612, -73.987495, "Manhattan", "Times Sq-42 St / 42 St-Port Authority"),
    ("Times Sq-42 St", ["N", "Q", "R", "W"], 40.754901, -73.987691, "Manhattan", "Times Sq-42 St / 42 St-Port Authority"),
    ("Times Sq", ["GS"], 40.755477, -73.986873, "Manhattan", "Times Sq-42 St / 42 St-Port Authority"),
    ("50 St", ["1"], 40.761728, -73.983849, "Manhattan", None),
    ("59 St-Columbus Circle", ["A", "B", "C", "D"], 40.768247, -73.981929, "Manhattan", "59 St-Columbus Circle"),
    ("59 St-Columbus Circle", ["1"], 40.768296, -73.981736, "Manhattan", "59 St-Columbus Circle"),
    ("66 St-Lincoln Center", ["1"], 40.773621, -73.982209, "Manhattan", None),
    ("72 St", ["1", "2", "3"], 40.778453, -73.981970, "Manhattan", None),
    ("79 St", ["1"], 40.783934, -73.979917, "Manhattan", None),
    ("86 St", ["1"], 40.788644, -73.976218, "Manhattan", None),
    ("96 St", ["1", "2", "3"], 40.793919, -73.972323, "Manhattan", None),
    ("103 St", ["1"], 40.799446, -73.968379, "Manhattan", None),
    ("110 St-Cathedral Pkwy", ["1"], 40.803967, -73.966847, "Manhattan", None),
    ("116 St-Columbia University", ["1"], 40.807722, -73.964113, "Manhattan", None),
    ("125 St", ["1"], 40.815581, -73.958372, "Manhattan", None),
    ("137 St-City College", ["1"], 40.822008, -73.953676, "Manhattan", None),
    ("145 St", ["1"], 40.826551, -73.950308, "Manhattan", None),
    ("157 St", ["1"], 40.834041, -73.944741, "Manhattan", None),
    ("168 St", ["A", "C"], 40.840719, -73.939561, "Manhattan", "168 St"),
    ("168 St", ["1"], 40.840556, -73.939534, "Manhattan", "168 St"),
    ("181 St", ["1"], 40.849505, -73.933596, "Manhattan", None),
    ("191 St", ["1"], 40.855225, -73.929412, "Manhattan", None),
    ("Dyckman St", ["1"], 40.860531, -73.925536, "Manhattan", None),
    ("207 St", ["1"], 40.864621, -73.918822, "Manhattan", None),
    ("215 St", ["1"], 40.869444, -73.915279, "Manhattan", None),
    ("Marble Hill-225 St", ["1"], 40.874561, -73.909831, "Manhattan", None),
    ("231 St", ["1"], 40.878856, -73.904834, "Bronx", None),
    ("238 St", ["1"], 40.884667, -73.900870, "Bronx", None),
    ("Van Cortlandt Park-242 St", ["1"], 40.889248, -73.898583, "Bronx", None),

    # IRT Lexington Avenue Line (4/5/6)
    ("Brooklyn Bridge-City Hall", ["4", "5", "6"], 40.713065, -74.004131, "Manhattan", "Chambers St / Brooklyn Bridge-City Hall"),
    ("Canal St", ["6"], 40.718803, -74.000193, "Manhattan", "Canal St"),
    ("Spring St", ["6"], 40.722301, -73.997141, "Manhattan", None),
    ("Bleecker St", ["6"], 40.725915, -73.994659, "Manhattan", "Bleecker St / Broadway-Lafayette St"),
    ("Astor Pl", ["6"], 40.730054, -73.991070, "Manhattan", None),
    ("14 St-Union Sq", ["4", "5", "6"], 40.735736, -73.990568, "Manhattan", "14 St-Union Sq"),
    ("14 St-Union Sq", ["L"], 40.734673, -73.990570, "Manhattan", "14 St-Union Sq"),
    ("14 St-Union Sq", ["N", "Q", "R", "W"], 40.735863, -73.989907, "Manhattan", "14 St-Union Sq"),
    ("23 St", ["6"], 40.739864, -73.986599, "Manhattan", None),
    ("28 St", ["6"], 40.743077, -73.984318, "Manhattan", None),
    ("33 St", ["6"], 40.746081, -73.982076, "Manhattan", None),
    ("Grand Central-42 St", ["4", "5", "6"], 40.751776, -73.976848, "Manhattan", "Grand Central-42 St"),
    ("Grand Central", ["7"], 40.751431, -73.976041, "Manhattan", "Grand Central-42 St"),
    ("Grand Central", ["GS"], 40.752769, -73.979189, "Manhattan", "Grand Central-42 St"),
    ("51 St", ["6"], 40.757107, -73.971917, "Manhattan", "51 St / Lexington Av-53 St"),
    ("59 St", ["4", "5", "6"], 40.762526, -73.967967, "Manhattan", "Lexington Av/59 St"),
    ("68 St-Hunter College", ["6"], 40.768141, -73.964015, "Manhattan", None),
    ("77 St", ["6"], 40.773621, -73.959874, "Manhattan", None),
    ("86 St", ["4", "5", "6"], 40.779492, -73.955589, "Manhattan", None),
    ("96 St", ["6"], 40.785672, -73.951014, "Manhattan", None),
    ("103 St", ["6"], 40.790600, -73.947478, "Manhattan", None),
    ("110 St", ["6"], 40.795020, -73.944430, "Manhattan", None),
    ("116 St", ["6"], 40.798629, -73.941617, "Manhattan", None),
    ("125 St", ["4", "5", "6"], 40.804138, -73.937594, "Manhattan", None),

    # IRT Pelham Line (6) - Bronx
    ("3 Av-138 St", ["6"], 40.810476, -73.926138, "Bronx", None),
    ("Brook Av", ["6"], 40.807566, -73.919241, "Bronx", None),
    ("Cypress Av", ["6"], 40.805368, -73.914042, "Bronx", None),
    ("East 143 St-St Mary's St", ["6"], 40.808719, -73.907657, "Bronx", None),
    ("East 149 St", ["6"], 40.812118, -73.904098, "Bronx", None),
    ("Longwood Av", ["6"], 40.816104, -73.896435, "Bronx", None),
    ("Hunts Point Av", ["6"], 40.820948, -73.890549, "Bronx", None),
    ("Whitlock Av", ["6"], 40.826525, -73.886283, "Bronx", None),
    ("Elder Av", ["6"], 40.828584, -73.879159, "Bronx", None),
    ("Morrison Av-Soundview", ["6"], 40.829521, -73.874516, "Bronx", None),
    ("St Lawrence Av", ["6"], 40.831509, -73.867618, "Bronx", None),
    ("Parkchester", ["6"], 40.833226, -73.860816, "Bronx", None),
    ("Castle Hill Av", ["6"], 40.834255, -73.851222, "Bronx", None),
    ("Zerega Av", ["6"], 40.836488, -73.847036, "Bronx", None),
    ("Westchester Sq-East Tremont Av", ["6"], 40.839892, -73.842952, "Bronx", None),
    ("Middletown Rd", ["6"], 40.843863, -73.836322, "Bronx", None),
    ("Buhre Av", ["6"], 40.846807, -73.832569, "Bronx", None),
    ("Pelham Bay Park", ["6"], 40.852462, -73.828121, "Bronx", None),

    # IRT White Plains Road Line (2/5) - Bronx
    ("149 St-Grand Concourse", ["4"], 40.818375, -73.927351, "Bronx", "149 St-Grand Concourse"),
    ("149 St-Grand Concourse", ["2", "5"], 40.818375, -73.927351, "Bronx", "149 St-Grand Concourse"),
    ("Jackson Av", ["2", "5"], 40.816104, -73.907948, "Bronx", None),
    ("Prospect Av", ["2", "5"], 40.819585, -73.901850, "Bronx", None),
    ("Intervale Av", ["2", "5"], 40.822181, -73.896736, "Bronx", None),
    ("Simpson St", ["2", "5"], 40.824073, -73.893097, "Bronx", None),
    ("Freeman St", ["2", "5"], 40.829993, -73.891865, "Bronx", None),
    ("174 St", ["2", "5"], 40.837288, -73.887734, "Bronx", None),
    ("West Farms Sq-East Tremont Av", ["2", "5"], 40.840295, -73.880049, "Bronx", None),
    ("East 180 St", ["2", "5"], 40.841680, -73.873490, "Bronx", None),
    ("Bronx Park East", ["2"], 40.848828, -73.868457, "Bronx", None),
    ("Pelham Pkwy", ["2"], 40.857192, -73.867615, "Bronx", None),
    ("Allerton Av", ["2"], 40.865462, -73.867352, "Bronx", None),
    ("Burke Av", ["2"], 40.871356, -73.867164, "Bronx", None),
    ("Gun Hill Rd", ["2"], 40.877839, -73.866256, "Bronx", None),
    ("219 St", ["2"], 40.883895, -73.862633, "Bronx", None),
    ("225 St", ["2"], 40.888022, -73.860341, "Bronx", None),
    ("233 St", ["2"], 40.893193, -73.857473, "Bronx", None),
    ("Nereid Av", ["2"], 40.898379, -73.854376, "Bronx", None),
    ("Wakefield-241 St", ["2"], 40.903125, -73.850628, "Bronx", None),

    # IRT Jerome Avenue Line (4) - Bronx
    ("138 St-Grand Concourse", ["4", "5"], 40.813224, -73.929849, "Bronx", None),
    ("167 St", ["4"], 40.835537, -73.921479, "Bronx", None),
    ("170 St", ["4"], 40.840075, -73.917062, "Bronx", None),
    ("176 St", ["4"], 40.848070, -73.911794, "Bronx", None),
    ("Burnside Av", ["4"], 40.853453, -73.907684, "Bronx", None),
    ("183 St", ["4"], 40.858407, -73.903879, "Bronx", None),
    ("Fordham Rd", ["4"], 40.862803, -73.901034, "Bronx", None),
    ("Kingsbridge Rd", ["4"], 40.867760, -73.897174, "Bronx", None),
    ("Bedford Park Blvd-Lehman College", ["4"], 40.873412, -73.890064, "Bronx", None),
    ("Mosholu Pkwy", ["4"], 40.879904, -73.884655, "Bronx", None),
    ("Woodlawn", ["4"], 40.886037, -73.878751, "Bronx", None),

    # IRT Flushing Line (7) - Manhattan/Queens
    ("34 St-Hudson Yards", ["7"], 40.755477, -74.000201, "Manhattan", None),
    ("5 Av", ["7"], 40.753821, -73.981963, "Manhattan", "42 St-Bryant Park / 5 Av"),
    ("Vernon Blvd-Jackson Av", ["7"], 40.742626, -73.953581, "Queens", None),
    ("Hunters Point Av", ["7"], 40.742216, -73.948916, "Queens", None),
    ("Court Sq", ["7"], 40.747023, -73.945264, "Queens", "Court Sq / Court Sq-23 St"),
    ("Court Sq", ["G"], 40.746554, -73.943832, "Queens", "Court Sq / Court Sq-23 St"),
    ("Queensboro Plaza", ["7", "N", "W"], 40.750582, -73.940202, "Queens", None),
    ("33 St-Rawson St", ["7"], 40.744587, -73.930997, "Queens", None),
    ("40 St-Lowery St", ["7"], 40.743781, -73.924016, "Queens", None),
    ("46 St-Bliss St", ["7"], 40.743132, -73.918435, "Queens", None),
    ("52 St", ["7"], 40.744149, -73.912549, "Queens", None),
    ("61 St-Woodside", ["7"], 40.746554, -73.902984, "Queens", None),
    ("69 St", ["7"], 40.746325, -73.896403, "Queens", None),
    ("74 St-Broadway", ["7"], 40.746848, -73.891394, "Queens", "Jackson Hts-Roosevelt Av / 74 St-Broadway"),
    ("82 St-Jackson Hts", ["7"], 40.747659, -73.883697, "Queens", None),
    ("90 St-Elmhurst Av", ["7"], 40.748408, -73.876613, "Queens", None),
    ("Junction Blvd", ["7"], 40.749145, -73.869527, "Queens", None),
    ("103 St-Corona Plaza", ["7"], 40.749865, -73.862700, "Queens", None),
    ("111 St", ["7"], 40.751728, -73.855334, "Queens", None),
    ("Mets-Willets Point", ["7"], 40.754622, -73.845625, "Queens", None),
    ("Flushing-Main St", ["7"], 40.759600, -73.830030, "Queens", None),

    # IND Eighth Avenue Line (A/C/E) - Manhattan
    ("Inwood-207 St", ["A"], 40.868072, -73.919899, "Manhattan", None),
    ("Dyckman St", ["A"], 40.865491, -73.927271, "Manhattan", None),
    ("190 St", ["A"], 40.859022, -73.932584, "Manhattan", None),
    ("181 St", ["A"], 40.851695, -73.937969, "Manhattan", None),
    ("175 St", ["A"], 40.847391, -73.939704, "Manhattan", None),
    ("163 St-Amsterdam Av", ["C"], 40.836013, -73.939892, "Manhattan", None),
    ("155 St", ["C"], 40.830518, -73.941514, "Manhattan", None),
    ("155 St", ["B", "D"], 40.830135, -73.938209, "Manhattan", None),
    ("145 St", ["A", "B", "C", "D"], 40.824783, -73.944216, "Manhattan", None),
    ("135 St", ["B", "C"], 40.817894, -73.947649, "Manhattan", None),
    ("125 St", ["A", "B", "C", "D"], 40.811109, -73.952343, "Manhattan", None),
    ("116 St", ["B", "C"], 40.802098, -73.954569, "Manhattan", None),
    ("110 St-Cathedral Pkwy", ["B", "C"], 40.800603, -73.958161, "Manhattan", None),
    ("103 St", ["B", "C"], 40.796092, -73.961454, "Manhattan", None),
    ("96 St", ["B", "C"], 40.791642, -73.964696, "Manhattan", None),
    ("86 St", ["B", "C"], 40.785868, -73.968916, "Manhattan", None),
    ("81 St-Museum of Natural History", ["B", "C"], 40.781433, -73.972143, "Manhattan", None),
    ("72 St", ["B", "C"], 40.775594, -73.976094, "Manhattan", None),
    ("50 St", ["C", "E"], 40.762456, -73.985984, "Manhattan", None),
    ("42 St-Port Authority Bus Terminal", ["A", "C", "E"], 40.757308, -73.989735, "Manhattan", "Times Sq-42 St / 42 St-Port Authority"),
    ("34 St-Penn Station", ["A", "C", "E"], 40.752287, -73.993391, "Manhattan", None),
    ("23 St", ["C", "E"], 40.745906, -73.998041, "Manhattan", None),
    ("14 St", ["A", "C", "E"], 40.740893, -74.001775, "Manhattan", "14 St / 8 Av"),
    ("West 4 St-Washington Sq", ["A", "B", "C", "D", "E", "F", "M"], 40.732338, -74.000495, "Manhattan", None),
    ("Spring St", ["C", "E"], 40.726227, -74.003739, "Manhattan", None),
    ("Canal St", ["A", "C", "E"], 40.720824, -74.005229, "Manhattan", None),
    ("Chambers St", ["A", "C"], 40.714111, -74.008585, "Manhattan", "Fulton St / Park Pl / Cortlandt St"),
    ("World Trade Center", ["E"], 40.712582, -74.009781, "Manhattan", "Fulton St / Park Pl / Cortlandt St"),
    ("Fulton St", ["2", "3"], 40.710374, -74.008268, "Manhattan", "Fulton St"),
    ("Fulton St", ["4", "5"], 40.710197, -74.006753, "Manhattan", "Fulton St"),
    ("Fulton St", ["A", "C"], 40.710660, -74.008019, "Manhattan", "Fulton St"),
    ("Fulton St", ["J", "Z"], 40.710368, -74.007687, "Manhattan", "Fulton St"),
    ("High St", ["A", "C"], 40.699337, -73.990531, "Brooklyn", None),

    # IND Sixth Avenue Line (B/D/F/M) - Manhattan
    ("57 St", ["F", "M"], 40.764326, -73.977547, "Manhattan", None),
    ("47-50 Sts-Rockefeller Ctr", ["B", "D", "F", "M"], 40.758663, -73.981329, "Manhattan", None),
    ("42 St-Bryant Park", ["B", "D", "F", "M"], 40.754222, -73.984569, "Manhattan", "42 St-Bryant Park / 5 Av"),
    ("34 St-Herald Sq", ["B", "D", "F", "M"], 40.749719, -73.987823, "Manhattan", "34 St-Herald Sq"),
    ("34 St-Herald Sq", ["N", "Q", "R", "W"], 40.749567, -73.987937, "Manhattan", "34 St-Herald Sq"),
    ("23 St", ["F", "M"], 40.742954, -73.992633, "Manhattan", None),
    ("14 St", ["F", "M"], 40.738228, -73.996209, "Manhattan", "14 St / 6 Av"),
    ("Broadway-Lafayette St", ["B", "D", "F", "M"], 40.725297, -73.996204, "Manhattan", "Bleecker St / Broadway-Lafayette St"),
    ("2 Av", ["F"], 40.723402, -73.989938, "Manhattan", None),
    ("Delancey St", ["F"], 40.718611, -73.988114, "Manhattan", "Delancey St-Essex St"),
    ("Essex St", ["J", "M", "Z"], 40.718315, -73.987437, "Manhattan", "Delancey St-Essex St"),
    ("East Broadway", ["F"], 40.713715, -73.990173, "Manhattan", None),
    ("York St", ["F"], 40.701397, -73.986751, "Brooklyn", None),

    # BMT Broadway Line (N/Q/R/W) - Manhattan
    ("Lexington Av/59 St", ["N", "R", "W"], 40.762660, -73.967258, "Manhattan", "Lexington Av/59 St"),
    ("Lexington Av/63 St", ["M", "Q"], 40.764629, -73.966113, "Manhattan", None),
    ("57 St-7 Av", ["N", "Q", "R", "W"], 40.764664, -73.980658, "Manhattan", None),
    ("49 St", ["N", "Q", "R", "W"], 40.759901, -73.984139, "Manhattan", None),
    ("28 St", ["N", "R", "W"], 40.745494, -73.988691, "Manhattan", None),
    ("23 St", ["N", "R", "W"], 40.741303, -73.989344, "Manhattan", None),
    ("8 St-NYU", ["N", "R", "W"], 40.730328, -73.992629, "Manhattan", None),
    ("Prince St", ["N", "R", "W"], 40.724329, -73.997702, "Manhattan", None),
    ("Canal St", ["R", "W"], 40.719527, -74.001775, "Manhattan", "Canal St"),
    ("Canal St", ["N", "Q"], 40.718711, -74.000183, "Manhattan", "Canal St"),
    ("Whitehall St-South Ferry", ["R", "W"], 40.703087, -74.012994, "Manhattan", "Whitehall St-South Ferry / South Ferry"),
    ("Cortlandt St", ["R", "W"], 40.710588, -74.011571, "Manhattan", "Fulton St / Park Pl / Cortlandt St"),
    ("Rector St", ["R", "W"], 40.707513, -74.013783, "Manhattan", None),

    # BMT Nassau Street Line (J/Z) - Manhattan
    ("Broad St", ["J", "Z"], 40.706476, -74.011056, "Manhattan", None),
    ("Chambers St", ["J", "Z"], 40.713243, -74.003401, "Manhattan", "Chambers St / Brooklyn Bridge-City Hall"),
    ("Canal St", ["J", "Z"], 40.718092, -73.999892, "Manhattan", "Canal St"),
    ("Bowery", ["J", "Z"], 40.720030, -73.993915, "Manhattan", None),

    # BROOKLYN STATIONS
    # IND Culver Line (F/G)
    ("Bergen St", ["F", "G"], 40.686145, -73.990862, "Brooklyn", None),
    ("Carroll St", ["F", "G"], 40.680303, -73.995048, "Brooklyn", None),
    ("Smith-9 Sts", ["F", "G"], 40.673581, -73.995959, "Brooklyn", None),
    ("4 Av-9 St", ["F", "G"], 40.670272, -73.989779, "Brooklyn", "4 Av-9 St"),
    ("7 Av", ["F", "G"], 40.666271, -73.980305, "Brooklyn", None),
    ("15 St-Prospect Park", ["F", "G"], 40.660365, -73.979493, "Brooklyn", None),
    ("Fort Hamilton Pkwy", ["F", "G"], 40.650782, -73.975776, "Brooklyn", None),
    ("Church Av", ["F", "G"], 40.644041, -73.979678, "Brooklyn", None),
    ("Ditmas Av", ["F"], 40.636119, -73.978172, "Brooklyn", None),
    ("18 Av", ["F"], 40.629755, -73.976971, "Brooklyn", None),
    ("Av I", ["F"], 40.625322, -73.976127, "Brooklyn", None),
    ("Bay Pkwy", ["F"], 40.620769, -73.975264, "Brooklyn", None),
    ("Av N", ["F"], 40.614840, -73.974197, "Brooklyn", None),
    ("Av P", ["F"], 40.608944, -73.973022, "Brooklyn", None),
    ("Kings Hwy", ["F"], 40.603217, -73.972361, "Brooklyn", None),
    ("Av U", ["F"], 40.596063, -73.973357, "Brooklyn", None),
    ("Av X", ["F"], 40.589740, -73.974113, "Brooklyn", None),
    ("Neptune Av", ["F"], 40.581011, -73.974574, "Brooklyn", None),
    ("West 8 St-NY Aquarium", ["F", "Q"], 40.576034, -73.975918, "Brooklyn", None),
    ("Coney Island-Stillwell Av", ["D", "F", "N", "Q"], 40.577422, -73.981233, "Brooklyn", None),

    # IND Crosstown Line (G)
    ("Greenpoint Av", ["G"], 40.731352, -73.954449, "Brooklyn", None),
    ("Nassau Av", ["G"], 40.724635, -73.951277, "Brooklyn", None),
    ("Metropolitan Av", ["G"], 40.712792, -73.951418, "Brooklyn", "Lorimer St / Metropolitan Av"),
    ("Broadway", ["G"], 40.706092, -73.950308, "Brooklyn", None),
    ("Flushing Av", ["G"], 40.700377, -73.950234, "Brooklyn", None),
    ("Myrtle-Willoughby Avs", ["G"], 40.694568, -73.949046, "Brooklyn", None),
    ("Bedford-Nostrand Avs", ["G"], 40.689627, -73.953522, "Brooklyn", None),
    ("Classon Av", ["G"], 40.688873, -73.960016, "Brooklyn", None),
    ("Clinton-Washington Avs", ["G"], 40.688089, -73.966839, "Brooklyn", None),
    ("Fulton St", ["G"], 40.687119, -73.975375, "Brooklyn", None),
    ("Hoyt-Schermerhorn Sts", ["A", "C", "G"], 40.688484, -73.985001, "Brooklyn", None),

    # IND Fulton Street Line (A/C) - Brooklyn
    ("Lafayette Av", ["C"], 40.686113, -73.973946, "Brooklyn", None),
    ("Clinton-Washington Avs", ["C"], 40.683263, -73.965838, "Brooklyn", None),
    ("Franklin Av", ["C"], 40.680596, -73.958161, "Brooklyn", "Franklin Av"),
    ("Franklin Av", ["FS"], 40.680596, -73.958161, "Brooklyn", "Franklin Av"),
    ("Nostrand Av", ["A", "C"], 40.680438, -73.950426, "Brooklyn", None),
    ("Kingston-Throop Avs", ["C"], 40.679921, -73.940858, "Brooklyn", None),
    ("Utica Av", ["A", "C"], 40.679364, -73.930729, "Brooklyn", None),
    ("Ralph Av", ["C"], 40.678822, -73.920786, "Brooklyn", None),
    ("Rockaway Av", ["C"], 40.678339, -73.911946, "Brooklyn", None),
    ("Liberty Av", ["C"], 40.674542, -73.896548, "Brooklyn", None),
    ("Van Siclen Av", ["C"], 40.678024, -73.890358, "Brooklyn", None),
    ("Shepherd Av", ["C"], 40.674461, -73.880862, "Brooklyn", None),

    # IRT Eastern Parkway Line (2/3/4/5)
    ("Borough Hall", ["2", "3"], 40.693219, -73.989998, "Brooklyn", "Court St / Borough Hall"),
    ("Borough Hall", ["4", "5"], 40.693219, -73.989998, "Brooklyn", "Court St / Borough Hall"),
    ("Hoyt St", ["2", "3"], 40.690545, -73.985065, "Brooklyn", None),
    ("Nevins St", ["2", "3", "4", "5"], 40.688246, -73.980492, "Brooklyn", None),
    ("Atlantic Av-Barclays Ctr", ["2", "3", "4", "5"], 40.684359, -73.977666, "Brooklyn", "Atlantic Av-Barclays Ctr"),
    ("Atlantic Av-Barclays Ctr", ["B", "Q"], 40.684359, -73.977666, "Brooklyn", "Atlantic Av-Barclays Ctr"),
    ("Atlantic Av-Barclays Ctr", ["D", "N", "R"], 40.684359, -73.977666, "Brooklyn", "Atlantic Av-Barclays Ctr"),
    ("Bergen St", ["2", "3"], 40.680829, -73.975098, "Brooklyn", None),
    ("Grand Army Plaza", ["2", "3"], 40.675235, -73.971046, "Brooklyn", None),
    ("Eastern Pkwy-Brooklyn Museum", ["2", "3"], 40.671987, -73.964375, "Brooklyn", None),
    ("Franklin Av-Medgar Evers College", ["2", "3", "4", "5", "FS"], 40.670682, -73.958131, "Brooklyn", "Franklin Av / Botanic Garden"),
    ("President St-Medgar Evers College", ["2", "5"], 40.667883, -73.950683, "Brooklyn", None),
    ("Sterling St", ["2", "5"], 40.662742, -73.950783, "Brooklyn", None),
    ("Winthrop St", ["2", "5"], 40.656652, -73.950308, "Brooklyn", None),
    ("Church Av", ["2", "5"], 40.650843, -73.949575, "Brooklyn", None),
    ("Beverly Rd", ["2", "5"], 40.645098, -73.948959, "Brooklyn", None),
    ("Newkirk Av-Little Haiti", ["2", "5"], 40.639967, -73.948411, "Brooklyn", None),
    ("Flatbush Av-Brooklyn College", ["2", "5"], 40.632836, -73.947642, "Brooklyn", None),

    # IRT Nostrand Avenue Line (2/5) - Note: Shares some stations
    ("Nostrand Av", ["3"], 40.669847, -73.950466, "Brooklyn", None),
    ("Kingston Av", ["3"], 40.669399, -73.942161, "Brooklyn", None),
    ("Crown Hts-Utica Av", ["3", "4"], 40.668897, -73.932942, "Brooklyn", None),
    ("Sutter Av-Rutland Rd", ["3"], 40.664717, -73.922613, "Brooklyn", None),
    ("Saratoga Av", ["3"], 40.661453, -73.916327, "Brooklyn", None),
    ("Rockaway Av", ["3"], 40.662549, -73.908946, "Brooklyn", None),
    ("Junius St", ["3"], 40.663515, -73.902447, "Brooklyn", None),
    ("Pennsylvania Av", ["3"], 40.664635, -73.894895, "Brooklyn", None),
    ("Van Siclen Av", ["3"], 40.665449, -73.889395, "Brooklyn", None),
    ("New Lots Av", ["3"], 40.666235, -73.884079, "Brooklyn", None),

    # BMT Canarsie Line (L)
    ("8 Av", ["L"], 40.739777, -74.002578, "Manhattan", "14 St / 8 Av"),
    ("6 Av", ["L"], 40.737335, -73.996786, "Manhattan", "14 St / 6 Av"),
    ("3 Av", ["L"], 40.732849, -73.986122, "Manhattan", None),
    ("1 Av", ["L"], 40.730953, -73.981628, "Manhattan", None),
    ("Bedford Av", ["L"], 40.717304, -73.956872, "Brooklyn", None),
    ("Lorimer St", ["L"], 40.714063, -73.950275, "Brooklyn", "Lorimer St / Metropolitan Av"),
    ("Graham Av", ["L"], 40.714565, -73.944053, "Brooklyn", None),
    ("Grand St", ["L"], 40.711926, -73.940534, "Brooklyn", None),
    ("Montrose Av", ["L"], 40.707739, -73.939561, "Brooklyn", None),
    ("Morgan Av", ["L"], 40.706152, -73.933147, "Brooklyn", None),
    ("Jefferson St", ["L"], 40.706607, -73.922914, "Brooklyn", None),
    ("DeKalb Av", ["L"], 40.703811, -73.918425, "Brooklyn", None),
    ("Myrtle-Wyckoff Avs", ["L"], 40.699814, -73.911586, "Brooklyn", "Myrtle-Wyckoff Avs"),
    ("Myrtle-Wyckoff Avs", ["M"], 40.699814, -73.911586, "Brooklyn", "Myrtle-Wyckoff Avs"),
    ("Halsey St", ["L"], 40.695602, -73.904084, "Brooklyn", None),
    ("Wilson Av", ["L"], 40.688764, -73.904046, "Brooklyn", None),
    ("Bushwick Av-Aberdeen St", ["L"], 40.682829, -73.905249, "Brooklyn", None),
    ("Broadway Junction", ["L"], 40.678334, -73.905316, "Brooklyn", "Broadway Junction"),
    ("Broadway Junction", ["A", "C"], 40.678334, -73.905316, "Brooklyn", "Broadway Junction"),
    ("Broadway Junction", ["J", "Z"], 40.678334, -73.905316, "Brooklyn", "Broadway Junction"),
    ("Atlantic Av", ["L"], 40.675345, -73.903097, "Brooklyn", None),
    ("Sutter Av", ["L"], 40.669367, -73.901975, "Brooklyn", None),
    ("Livonia Av", ["L"], 40.664038, -73.900571, "Brooklyn", None),
    ("New Lots Av", ["L"], 40.658733, -73.899232, "Brooklyn", None),
    ("East 105 St", ["L"], 40.650573, -73.899485, "Brooklyn", None),
    ("Canarsie-Rockaway Pkwy", ["L"], 40.646654, -73.901850, "Brooklyn", None),

    # BMT Jamaica Line (J/Z)
    ("Marcy Av", ["J", "M", "Z"], 40.708359, -73.957757, "Brooklyn", None),
    ("Hewes St", ["J", "M"], 40.706889, -73.953431, "Brooklyn", None),
    ("Lorimer St", ["J", "M"], 40.703844, -73.947407, "Brooklyn", None),
    ("Flushing Av", ["J", "M"], 40.700377, -73.941489, "Brooklyn", None),
    ("Myrtle Av-Broadway", ["J", "M", "Z"], 40.697207, -73.935657, "Brooklyn", None),
    ("Central Av", ["M"], 40.697857, -73.927397, "Brooklyn", None),
    ("Knickerbocker Av", ["M"], 40.698664, -73.919711, "Brooklyn", None),
    ("Gates Av", ["J", "Z"], 40.689627, -73.922131, "Brooklyn", None),
    ("Kosciuszko St", ["J"], 40.693115, -73.928814, "Brooklyn", None),
    ("Halsey St", ["J"], 40.686210, -73.916559, "Brooklyn", None),
    ("Chauncey St", ["J", "Z"], 40.682893, -73.910456, "Brooklyn", None),
    ("Alabama Av", ["J"], 40.676992, -73.898654, "Brooklyn", None),
    ("Van Siclen Av", ["J", "Z"], 40.672800, -73.891479, "Brooklyn", None),
    ("Cleveland St", ["J"], 40.679947, -73.884639, "Brooklyn", None),
    ("Norwood Av", ["J", "Z"], 40.681311, -73.880039, "Brooklyn", None),
    ("Crescent St", ["J", "Z"], 40.683194, -73.873785, "Brooklyn", None),
    ("Cypress Hills", ["J"], 40.689616, -73.873412, "Brooklyn", None),
    ("75 St-Elderts Ln", ["J", "Z"], 40.691324, -73.867351, "Queens", None),
    ("85 St-Forest Pkwy", ["J", "Z"], 40.692435, -73.860017, "Queens", None),
    ("Woodhaven Blvd", ["J", "Z"], 40.693879, -73.851576, "Queens", None),
    ("104 St", ["J", "Z"], 40.695178, -73.844521, "Queens", None),
    ("111 St", ["J"], 40.697418, -73.836345, "Queens", None),
    ("121 St", ["J", "Z"], 40.700492, -73.828294, "Queens", None),

    # BMT Brighton Line (B/Q)
    ("DeKalb Av", ["B", "Q", "R"], 40.690635, -73.981824, "Brooklyn", None),
    ("7 Av", ["B", "Q"], 40.677810, -73.972367, "Brooklyn", None),
    ("Prospect Park", ["B", "Q", "FS"], 40.661614, -73.962246, "Brooklyn", None),
    ("Parkside Av", ["Q"], 40.655292, -73.961495, "Brooklyn", None),
    ("Church Av", ["B", "Q"], 40.650527, -73.962982, "Brooklyn", None),
    ("Beverley Rd", ["Q"], 40.644031, -73.964492, "Brooklyn", None),
    ("Cortelyou Rd", ["Q"], 40.640927, -73.963891, "Brooklyn", None),
    ("Newkirk Plaza", ["B", "Q"], 40.635082, -73.962793, "Brooklyn", None),
    ("Av H", ["Q"], 40.629143, -73.961673, "Brooklyn", None),
    ("Av J", ["Q"], 40.625039, -73.960803, "Brooklyn", None),
    ("Av M", ["Q"], 40.617618, -73.959399, "Brooklyn", None),
    ("Kings Hwy", ["B", "Q"], 40.608636, -73.957734, "Brooklyn", None),
    ("Av U", ["Q"], 40.599017, -73.955929, "Brooklyn", None),
    ("Neck Rd", ["Q"], 40.595246, -73.955161, "Brooklyn", None),
    ("Sheepshead Bay", ["B", "Q"], 40.586896, -73.954155, "Brooklyn", None),
    ("Brighton Beach", ["B", "Q"], 40.577621, -73.961376, "Brooklyn", None),
    ("Ocean Pkwy", ["Q"], 40.576312, -73.968501, "Brooklyn", None),

    # BMT Fourth Avenue Line (D/N/R)
    ("Jay St-MetroTech", ["A", "C", "F"], 40.692338, -73.987342, "Brooklyn", "Jay St-MetroTech"),
    ("Jay St-MetroTech", ["R"], 40.692338, -73.987342, "Brooklyn", "Jay St-MetroTech"),
    ("Court St", ["R"], 40.694196, -73.991641, "Brooklyn", "Court St / Borough Hall"),
    ("Union St", ["R"], 40.677316, -73.983173, "Brooklyn", None),
    ("9 St", ["R"], 40.670847, -73.988302, "Brooklyn", "4 Av-9 St"),
    ("Prospect Av", ["R"], 40.665414, -73.992872, "Brooklyn", None),
    ("25 St", ["R"], 40.660397, -73.998091, "Brooklyn", None),
    ("36 St", ["D", "N", "R"], 40.655144, -74.003549, "Brooklyn", None),
    ("45 St", ["R"], 40.648939, -74.010006, "Brooklyn", None),
    ("53 St", ["R"], 40.645069, -74.014034, "Brooklyn", None),
    ("59 St", ["N", "R"], 40.641362, -74.017881, "Brooklyn", None),
    ("Bay Ridge Av", ["R"], 40.634967, -74.023377, "Brooklyn", None),
    ("77 St", ["R"], 40.629742, -74.025508, "Brooklyn", None),
    ("86 St", ["R"], 40.622687, -74.028398, "Brooklyn", None),
    ("Bay Ridge-95 St", ["R"], 40.616622, -74.030876, "Brooklyn", None),

    # BMT West End Line (D)
    ("9 Av", ["D"], 40.646292, -73.994324, "Brooklyn", None),
    ("Fort Hamilton Pkwy", ["D"], 40.640914, -73.994304, "Brooklyn", None),
    ("50 St", ["D"], 40.636310, -73.994798, "Brooklyn", None),
    ("55 St", ["D"], 40.631435, -73.995476, "Brooklyn", None),
    ("62 St", ["D"], 40.626472, -73.996895, "Brooklyn", "New Utrecht Av / 62 St"),
    ("71 St", ["D"], 40.619589, -73.998864, "Brooklyn", None),
    ("79 St", ["D"], 40.613501, -74.000967, "Brooklyn", None),
    ("18 Av", ["D"], 40.607954, -74.001736, "Brooklyn", None),
    ("20 Av", ["D"], 40.604556, -73.998168, "Brooklyn", None),
    ("Bay Pkwy", ["D"], 40.601875, -73.993728, "Brooklyn", None),
    ("25 Av", ["D"], 40.597704, -73.986829, "Brooklyn", None),
    ("Bay 50 St", ["D"], 40.588841, -73.983765, "Brooklyn", None),

    # BMT Sea Beach Line (N)
    ("8 Av", ["N"], 40.635064, -74.011719, "Brooklyn", None),
    ("Fort Hamilton Pkwy", ["N"], 40.631386, -74.005351, "Brooklyn", None),
    ("New Utrecht Av", ["N"], 40.624842, -73.996353, "Brooklyn", "New Utrecht Av / 62 St"),
    ("18 Av", ["N"], 40.620671, -73.990414, "Brooklyn", None),
    ("20 Av", ["N"], 40.617109, -73.985026, "Brooklyn", None),
    ("Bay Pkwy", ["N"], 40.611815, -73.981848, "Brooklyn", None),
    ("Kings Hwy", ["N"], 40.603923, -73.980353, "Brooklyn", None),
    ("Av U", ["N"], 40.597473, -73.979137, "Brooklyn", None),
    ("86 St", ["N"], 40.592721, -73.978164, "Brooklyn", None),

    # Franklin Avenue Shuttle (S)
    ("Botanic Garden", ["FS"], 40.670343, -73.959245, "Brooklyn", "Franklin Av / Botanic Garden"),
    ("Park Pl", ["FS"], 40.674772, -73.957624, "Brooklyn", None),

    # QUEENS STATIONS
    # IND Queens Boulevard Line (E/F/M/R)
    ("Court Sq-23 St", ["E", "M"], 40.747846, -73.946204, "Queens", "Court Sq / Court Sq-23 St"),
    ("21 St-Queensbridge", ["F"], 40.754203, -73.942836, "Queens", None),
    ("Roosevelt Island", ["F", "M"], 40.759145, -73.953410, "Manhattan", None),
    ("Lexington Av/53 St", ["E", "M"], 40.757552, -73.969055, "Manhattan", "51 St / Lexington Av-53 St"),
    ("5 Av/53 St", ["E", "F"], 40.760167, -73.975224, "Manhattan", None),
    ("7 Av", ["B", "D", "E"], 40.762862, -73.981637, "Manhattan", None),
    ("Queens Plaza", ["E", "M", "R"], 40.748973, -73.937243, "Queens", None),
    ("36 St", ["M", "R"], 40.752039, -73.928781, "Queens", None),
    ("Steinway St", ["M", "R"], 40.756880, -73.920372, "Queens", None),
    ("46 St", ["M", "R"], 40.756312, -73.913333, "Queens", None),
    ("Northern Blvd", ["M", "R"], 40.752885, -73.906006, "Queens", None),
    ("65 St", ["M", "R"], 40.749669, -73.898453, "Queens", None),
    ("Jackson Hts-Roosevelt Av", ["E", "F", "M", "R"], 40.746644, -73.891338, "Queens", "Jackson Hts-Roosevelt Av / 74 St-Broadway"),
    ("Elmhurst Av", ["M", "R"], 40.742454, -73.882017, "Queens", None),
    ("Grand Av-Newtown", ["M", "R"], 40.737015, -73.877223, "Queens", None),
    ("Woodhaven Blvd", ["M", "R"], 40.733106, -73.869229, "Queens", None),
    ("63 Dr-Rego Park", ["M", "R"], 40.729846, -73.861604, "Queens", None),
    ("67 Av", ["M", "R"], 40.726523, -73.852719, "Queens", None),
    ("Forest Hills-71 Av", ["E", "F", "M", "R"], 40.721691, -73.844521, "Queens", None),
    ("75 Av", ["E", "F"], 40.718331, -73.837324, "Queens", None),
    ("Kew Gardens-Union Tpke", ["E", "F"], 40.714441, -73.831008, "Queens", None),
    ("Briarwood", ["E", "F"], 40.709179, -73.820574, "Queens", None),
    ("Jamaica-179 St", ["F"], 40.712646, -73.783817, "Queens", None),
    ("Sutphin Blvd", ["F"], 40.705461, -73.810708, "Queens", None),
    ("Jamaica Center-Parsons/Archer", ["E", "J", "Z"], 40.702147, -73.801109, "Queens", None),
    ("169 St", ["F"], 40.710517, -73.793604, "Queens", None),
    ("Parsons Blvd", ["F"], 40.707564, -73.803326, "Queens", None),
    ("Sutphin Blvd-Archer Av-JFK Airport", ["E", "J", "Z"], 40.700486, -73.807969, "Queens", None),
    ("Jamaica-Van Wyck", ["E"], 40.702566, -73.816859, "Queens", None),

    # IND Rockaway Line (A/S)
    ("Euclid Av", ["A", "C"], 40.675377, -73.872106, "Brooklyn", None),
    ("Grant Av", ["A"], 40.677044, -73.865031, "Brooklyn", None),
    ("80 St", ["A"], 40.679371, -73.858992, "Queens", None),
    ("88 St", ["A"], 40.679843, -73.851346, "Queens", None),
    ("Rockaway Blvd", ["A"], 40.680429, -73.843853, "Queens", None),
    ("104 St", ["A"], 40.681711, -73.837683, "Queens", None),
    ("111 St", ["A"], 40.684331, -73.832163, "Queens", None),
    ("Ozone Park-Lefferts Blvd", ["A"], 40.685951, -73.825798, "Queens", None),
    ("Aqueduct Racetrack", ["A"], 40.672097, -73.835919, "Queens", None),
    ("Aqueduct-N Conduit Av", ["A"], 40.668234, -73.834058, "Queens", None),
    ("Howard Beach-JFK Airport", ["A"], 40.660476, -73.830301, "Queens", None),
    ("Broad Channel", ["A", "RS"], 40.608382, -73.815925, "Queens", None),
    ("Beach 90 St", ["RS"], 40.588034, -73.813641, "Queens", None),
    ("Beach 98 St", ["RS"], 40.585307, -73.820558, "Queens", None),
    ("Beach 105 St", ["RS"], 40.583209, -73.827559, "Queens", None),
    ("Rockaway Park-Beach 116 St", ["RS"], 40.580903, -73.835592, "Queens", None),
    ("Beach 67 St", ["A"], 40.590927, -73.796924, "Queens", None),
    ("Beach 60 St", ["A"], 40.592374, -73.788522, "Queens", None),
    ("Beach 44 St", ["A"], 40.592943, -73.776013, "Queens", None),
    ("Beach 36 St", ["A"], 40.595398, -73.768175, "Queens", None),
    ("Beach 25 St", ["A"], 40.600066, -73.761353, "Queens", None),
    ("Far Rockaway-Mott Av", ["A"], 40.603995, -73.755405, "Queens", None),

    # BMT Astoria Line (N/W)
    ("Astoria-Ditmars Blvd", ["N", "W"], 40.775036, -73.912034, "Queens", None),
    ("Astoria Blvd", ["N", "W"], 40.770258, -73.917843, "Queens", None),
    ("30 Av", ["N", "W"], 40.766779, -73.921479, "Queens", None),
    ("Broadway", ["N", "W"], 40.761820, -73.925508, "Queens", None),
    ("36 Av", ["N", "W"], 40.756804, -73.929575, "Queens", None),
    ("39 Av", ["N", "W"], 40.752882, -73.932755, "Queens", None),

    # STATEN ISLAND RAILWAY (SIR)
    ("St George", ["SIR"], 40.643748, -74.073643, "Staten Island", None),
    ("Tompkinsville", ["SIR"], 40.636949, -74.074835, "Staten Island", None),
    ("Stapleton", ["SIR"], 40.627316, -74.075750, "Staten Island", None),
    ("Clifton", ["SIR"], 40.621319, -74.070809, "Staten Island", None),
    ("Grasmere", ["SIR"], 40.603117, -74.084087, "Staten Island", None),
    ("Old Town", ["SIR"], 40.596612, -74.087168, "Staten Island", None),
    ("Dongan Hills", ["SIR"], 40.588849, -74.096036, "Staten Island", None),
    ("Jefferson Av", ["SIR"], 40.583183, -74.103508, "Staten Island", None),
    ("Grant City", ["SIR"], 40.578847, -74.109724, "Staten Island", None),
    ("New Dorp", ["SIR"], 40.573502, -74.117295, "Staten Island", None),
    ("Oakwood Heights", ["SIR"], 40.565280, -74.126172, "Staten Island", None),
    ("Bay Terrace", ["SIR"], 40.556676, -74.136669, "Staten Island", None),
    ("Great Kills", ["SIR"], 40.551341, -74.151443, "Staten Island", None),
    ("Eltingville", ["SIR"], 40.544601, -74.164336, "Staten Island", None),
    ("Annadale", ["SIR"], 40.540544, -74.178168, "Staten Island", None),
    ("Huguenot", ["SIR"], 40.533674, -74.191734, "Staten Island", None),
    ("Prince's Bay", ["SIR"], 40.525507, -74.200027, "Staten Island", None),
    ("Pleasant Plains", ["SIR"], 40.522422, -74.217847, "Staten Island", None),
    ("Richmond Valley", ["SIR"], 40.519631, -74.229141, "Staten Island", None),
    ("Arthur Kill", ["SIR"], 40.516578, -74.242096, "Staten Island", None),
    ("Tottenville", ["SIR"], 40.512764, -74.251961, "Staten Island", None),

    # Additional Manhattan Stations - Second Avenue Subway
    ("72 St", ["Q"], 40.768799, -73.958424, "Manhattan", None),
    ("86 St", ["Q"], 40.777891, -73.951618, "Manhattan", None),
    ("96 St", ["Q"], 40.784318, -73.947152, "Manhattan", None),
    # Missing Manhattan Stations
    ("Grand St", ["B", "D"], 40.718267, -73.993753, "Manhattan", None),
    ("5 Av-59 St", ["N", "R", "W"], 40.764811, -73.973347, "Manhattan", None),

    # Additional Brooklyn Stations
    ("Clark St", ["2", "3"], 40.697466, -73.993086, "Brooklyn", None),

    # IND Concourse Line (B/D) - Bronx
    ("161 St-Yankee Stadium", ["4"], 40.827994, -73.925831, "Bronx", "161 St-Yankee Stadium"),
    ("161 St-Yankee Stadium", ["B", "D"], 40.827994, -73.925831, "Bronx", "161 St-Yankee Stadium"),
    ("167 St", ["B", "D"], 40.833771, -73.921479, "Bronx", None),
    ("170 St", ["B", "D"], 40.839306, -73.917741, "Bronx", None),
    ("174-175 Sts", ["B", "D"], 40.845920, -73.910136, "Bronx", None),
    ("Tremont Av", ["B", "D"], 40.850411, -73.905227, "Bronx", None),
    ("182-183 Sts", ["B", "D"], 40.856093, -73.900741, "Bronx", None),
    ("Fordham Rd", ["B", "D"], 40.861296, -73.897749, "Bronx", None),
    ("Kingsbridge Rd", ["B", "D"], 40.866978, -73.893509, "Bronx", None),
    ("Bedford Park Blvd", ["B", "D"], 40.873244, -73.887138, "Bronx", None),
    ("Norwood-205 St", ["D"], 40.874811, -73.878855, "Bronx", None),

    # IRT Dyre Avenue Line (5) - Bronx
    ("Morris Park", ["5"], 40.854364, -73.860495, "Bronx", None),
    ("Pelham Pkwy", ["5"], 40.858985, -73.855350, "Bronx", None),
    ("Gun Hill Rd", ["5"], 40.869526, -73.846384, "Bronx", None),
    ("Baychester Av", ["5"], 40.878663, -73.838591, "Bronx", None),
    ("Eastchester-Dyre Av", ["5"], 40.888224, -73.830834, "Bronx", None),

    # Additional Bronx Stations
    ("3 Av-149 St", ["2", "5"], 40.816109, -73.917757, "Bronx", None),
    ("Mt Eden Av", ["4"], 40.844434, -73.914685, "Bronx", None),

    # Queens - Additional Stations
    ("21 St", ["G"], 40.744065, -73.949724, "Queens", None),
    ("Seneca Av", ["M"], 40.702762, -73.907660, "Queens", None),
    ("Forest Av", ["M"], 40.704423, -73.903077, "Queens", None),
    ("Fresh Pond Rd", ["M"], 40.706186, -73.895877, "Queens", None),
    ("Middle Village-Metropolitan Av", ["M"], 40.711396, -73.889601, "Queens", None),

    # Additional Manhattan Stations
    ("Wall St", ["2", "3"], 40.706821, -74.009209, "Manhattan", None),
    ("Wall St", ["4", "5"], 40.707557, -74.011862, "Manhattan", None),
    ("Bowling Green", ["4", "5"], 40.704817, -74.014065, "Manhattan", None),
    ("Park Pl", ["2", "3"], 40.713051, -74.008811, "Manhattan", "Fulton St / Park Pl / Cortlandt St"),

    # IRT Lenox Avenue Line (2/3) - Harlem
    ("Central Park North-110 St", ["2", "3"], 40.799075, -73.951822, "Manhattan", None),
    ("116 St", ["2", "3"], 40.802098, -73.949625, "Manhattan", None),
    ("125 St", ["2", "3"], 40.807754, -73.945495, "Manhattan", None),
    ("135 St", ["2", "3"], 40.814229, -73.940772, "Manhattan", None),
    ("145 St", ["2", "3"], 40.820421, -73.936425, "Manhattan", None),
    ("Harlem-148 St", ["3"], 40.824073, -73.936245, "Manhattan", None),
]
