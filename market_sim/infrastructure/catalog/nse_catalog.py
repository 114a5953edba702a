"""
Static NSE/BSE catalog: symbol -> name, sector and base price.

Base prices are approximate February 2026 levels and only anchor the
simulation; they are not market data. Indices use the "Index" sector.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from market_sim.domain.entities.catalog_entry import INDEX_SECTOR, CatalogEntry

# symbol: (name, sector, base price)
STOCKS: dict[str, tuple[str, str, float]] = {
    # NIFTY 50 STOCKS
    "RELIANCE.NS": ("Reliance Industries", "Oil & Gas", 1397),
    "TCS.NS": ("Tata Consultancy Services", "IT", 3129),
    "HDFCBANK.NS": ("HDFC Bank", "Banking", 929),
    "INFY.NS": ("Infosys", "IT", 1463),
    "ICICIBANK.NS": ("ICICI Bank", "Banking", 1044),
    "HINDUNILVR.NS": ("Hindustan Unilever", "FMCG", 2285),
    "SBIN.NS": ("State Bank of India", "Banking", 768),
    "BHARTIARTL.NS": ("Bharti Airtel", "Telecom", 1969),
    "KOTAKBANK.NS": ("Kotak Mahindra Bank", "Banking", 1785),
    "ITC.NS": ("ITC Ltd", "FMCG", 438),
    "LT.NS": ("Larsen & Toubro", "Construction", 3580),
    "AXISBANK.NS": ("Axis Bank", "Banking", 1028),
    "ASIANPAINT.NS": ("Asian Paints", "Paints", 2320),
    "MARUTI.NS": ("Maruti Suzuki", "Automobile", 12150),
    "BAJFINANCE.NS": ("Bajaj Finance", "Finance", 931),
    "SUNPHARMA.NS": ("Sun Pharma", "Pharma", 1785),
    "TATAMOTORS.NS": ("Tata Motors", "Automobile", 725),
    "WIPRO.NS": ("Wipro", "IT", 295),
    "HCLTECH.NS": ("HCL Technologies", "IT", 1780),
    "ULTRACEMCO.NS": ("UltraTech Cement", "Cement", 11250),
    "NESTLEIND.NS": ("Nestle India", "FMCG", 2185),
    "POWERGRID.NS": ("Power Grid Corp", "Power", 295),
    "NTPC.NS": ("NTPC Ltd", "Power", 335),
    "TATASTEEL.NS": ("Tata Steel", "Steel", 135),
    "JSWSTEEL.NS": ("JSW Steel", "Steel", 945),
    "TECHM.NS": ("Tech Mahindra", "IT", 1680),
    "ADANIENT.NS": ("Adani Enterprises", "Conglomerate", 2385),
    "ADANIPORTS.NS": ("Adani Ports", "Infrastructure", 1185),
    "ONGC.NS": ("ONGC", "Oil & Gas", 265),
    "BAJAJ-AUTO.NS": ("Bajaj Auto", "Automobile", 8950),
    "HEROMOTOCO.NS": ("Hero MotoCorp", "Automobile", 4285),
    "EICHERMOT.NS": ("Eicher Motors", "Automobile", 5120),
    "DRREDDY.NS": ("Dr. Reddys Labs", "Pharma", 1285),
    "CIPLA.NS": ("Cipla", "Pharma", 1485),
    "DIVISLAB.NS": ("Divis Labs", "Pharma", 5985),
    "BPCL.NS": ("Bharat Petroleum", "Oil & Gas", 285),
    "GRASIM.NS": ("Grasim Industries", "Cement", 2685),
    "BRITANNIA.NS": ("Britannia Industries", "FMCG", 4985),
    "COALINDIA.NS": ("Coal India", "Mining", 385),
    "HINDALCO.NS": ("Hindalco Industries", "Metals", 595),
    "APOLLOHOSP.NS": ("Apollo Hospitals", "Healthcare", 7185),
    "SBILIFE.NS": ("SBI Life Insurance", "Insurance", 1485),
    "HDFCLIFE.NS": ("HDFC Life Insurance", "Insurance", 645),
    "BAJAJFINSV.NS": ("Bajaj Finserv", "Finance", 1785),
    "M&M.NS": ("Mahindra & Mahindra", "Automobile", 2985),
    "INDUSINDBK.NS": ("IndusInd Bank", "Banking", 985),
    "ADANIGREEN.NS": ("Adani Green Energy", "Power", 1085),

    # NIFTY NEXT 50
    "SIEMENS.NS": ("Siemens India", "Capital Goods", 4850),
    "HAVELLS.NS": ("Havells India", "Consumer Durables", 1380),
    "PIDILITIND.NS": ("Pidilite Industries", "Chemicals", 2650),
    "GODREJCP.NS": ("Godrej Consumer Products", "FMCG", 1180),
    "DABUR.NS": ("Dabur India", "FMCG", 545),
    "MARICO.NS": ("Marico", "FMCG", 585),
    "BERGEPAINT.NS": ("Berger Paints", "Paints", 545),
    "DLF.NS": ("DLF Ltd", "Real Estate", 785),
    "INDIGO.NS": ("InterGlobe Aviation", "Aviation", 3250),
    "SHREECEM.NS": ("Shree Cement", "Cement", 24500),
    "AMBUJACEM.NS": ("Ambuja Cements", "Cement", 585),
    "ACC.NS": ("ACC Ltd", "Cement", 2180),
    "BANKBARODA.NS": ("Bank of Baroda", "Banking", 245),
    "PNB.NS": ("Punjab National Bank", "Banking", 95),
    "CANBK.NS": ("Canara Bank", "Banking", 485),
    "UNIONBANK.NS": ("Union Bank of India", "Banking", 125),
    "IDFCFIRSTB.NS": ("IDFC First Bank", "Banking", 78),
    "FEDERALBNK.NS": ("Federal Bank", "Banking", 148),
    "BANDHANBNK.NS": ("Bandhan Bank", "Banking", 215),
    "RBLBANK.NS": ("RBL Bank", "Banking", 185),
    "YESBANK.NS": ("Yes Bank", "Banking", 22),
    "AUBANK.NS": ("AU Small Finance Bank", "Banking", 685),
    "ICICIPRULI.NS": ("ICICI Prudential Life", "Insurance", 545),
    "ICICIGI.NS": ("ICICI Lombard", "Insurance", 1380),
    "NAUKRI.NS": ("Info Edge India", "Internet", 4850),
    "ZOMATO.NS": ("Zomato", "Food Tech", 185),
    "PAYTM.NS": ("Paytm (One97)", "Fintech", 485),
    "NYKAA.NS": ("Nykaa (FSN E-Commerce)", "E-Commerce", 168),
    "DMART.NS": ("Avenue Supermarts (DMart)", "Retail", 3850),
    "POLICYBZR.NS": ("PB Fintech (Policybazaar)", "Fintech", 485),

    # IT SECTOR
    "LTIM.NS": ("LTIMindtree", "IT", 5250),
    "MPHASIS.NS": ("Mphasis", "IT", 2380),
    "COFORGE.NS": ("Coforge", "IT", 5850),
    "PERSISTENT.NS": ("Persistent Systems", "IT", 4250),
    "LTTS.NS": ("L&T Technology Services", "IT", 4650),
    "TATAELXSI.NS": ("Tata Elxsi", "IT", 6850),
    "MINDTREE.NS": ("Mindtree", "IT", 4180),
    "CYIENT.NS": ("Cyient", "IT", 1850),
    "HAPPSTMNDS.NS": ("Happiest Minds", "IT", 785),
    "SONATSOFTW.NS": ("Sonata Software", "IT", 585),
    "ROUTE.NS": ("Route Mobile", "IT", 1650),
    "MASTEK.NS": ("Mastek", "IT", 2450),
    "BIRLASOFT.NS": ("Birlasoft", "IT", 585),
    "KPITTECH.NS": ("KPIT Technologies", "IT", 1280),
    "ZENSAR.NS": ("Zensar Technologies", "IT", 485),
    "NIITLTD.NS": ("NIIT Ltd", "IT", 385),
    "HEXAWARE.NS": ("Hexaware Technologies", "IT", 685),

    # PHARMA & HEALTHCARE
    "LUPIN.NS": ("Lupin", "Pharma", 1285),
    "AUROPHARMA.NS": ("Aurobindo Pharma", "Pharma", 985),
    "BIOCON.NS": ("Biocon", "Pharma", 285),
    "TORNTPHARM.NS": ("Torrent Pharma", "Pharma", 2250),
    "ALKEM.NS": ("Alkem Labs", "Pharma", 4850),
    "ZYDUSLIFE.NS": ("Zydus Lifesciences", "Pharma", 685),
    "IPCALAB.NS": ("IPCA Labs", "Pharma", 1085),
    "LAURUSLABS.NS": ("Laurus Labs", "Pharma", 385),
    "GLENMARK.NS": ("Glenmark Pharma", "Pharma", 985),
    "NATCOPHARM.NS": ("Natco Pharma", "Pharma", 785),
    "ABBOTINDIA.NS": ("Abbott India", "Pharma", 24500),
    "GLAXO.NS": ("GlaxoSmithKline Pharma", "Pharma", 1650),
    "PFIZER.NS": ("Pfizer India", "Pharma", 4250),
    "SANOFI.NS": ("Sanofi India", "Pharma", 6850),
    "MAXHEALTH.NS": ("Max Healthcare", "Healthcare", 685),
    "FORTIS.NS": ("Fortis Healthcare", "Healthcare", 385),
    "METROPOLIS.NS": ("Metropolis Healthcare", "Healthcare", 1650),
    "LALPATHLAB.NS": ("Dr Lal PathLabs", "Healthcare", 2250),
    "THYROCARE.NS": ("Thyrocare Technologies", "Healthcare", 585),

    # AUTOMOBILE & AUTO ANCILLARY
    "ASHOKLEY.NS": ("Ashok Leyland", "Automobile", 185),
    "TVSMOTOR.NS": ("TVS Motor", "Automobile", 1850),
    "ESCORTS.NS": ("Escorts Kubota", "Automobile", 2850),
    "MOTHERSON.NS": ("Motherson Sumi", "Auto Ancillary", 125),
    "BOSCHLTD.NS": ("Bosch", "Auto Ancillary", 18500),
    "MRF.NS": ("MRF Ltd", "Tyres", 125000),
    "APOLLOTYRE.NS": ("Apollo Tyres", "Tyres", 385),
    "BALKRISIND.NS": ("Balkrishna Industries", "Tyres", 2450),
    "CEAT.NS": ("CEAT Ltd", "Tyres", 2180),
    "EXIDEIND.NS": ("Exide Industries", "Auto Ancillary", 285),
    "AMARAJABAT.NS": ("Amara Raja Batteries", "Auto Ancillary", 685),
    "BHARATFORG.NS": ("Bharat Forge", "Auto Ancillary", 1180),
    "SUNDRMFAST.NS": ("Sundram Fasteners", "Auto Ancillary", 985),
    "ENDURANCE.NS": ("Endurance Technologies", "Auto Ancillary", 1650),
    "SONACOMS.NS": ("Sona BLW Precision", "Auto Ancillary", 585),

    # FMCG
    "COLPAL.NS": ("Colgate Palmolive", "FMCG", 2450),
    "EMAMILTD.NS": ("Emami", "FMCG", 485),
    "TATACONSUM.NS": ("Tata Consumer", "FMCG", 1085),
    "VBL.NS": ("Varun Beverages", "FMCG", 1450),
    "UBL.NS": ("United Breweries", "FMCG", 1650),
    "MCDOWELL-N.NS": ("United Spirits", "FMCG", 1180),
    "RADICO.NS": ("Radico Khaitan", "FMCG", 1285),
    "JYOTHYLAB.NS": ("Jyothy Labs", "FMCG", 385),
    "BAJAJCON.NS": ("Bajaj Consumer Care", "FMCG", 185),
    "ZYDUSWELL.NS": ("Zydus Wellness", "FMCG", 1650),

    # POWER & ENERGY
    "TATAPOWER.NS": ("Tata Power", "Power", 285),
    "ADANIPOWER.NS": ("Adani Power", "Power", 385),
    "NHPC.NS": ("NHPC", "Power", 65),
    "SJVN.NS": ("SJVN Ltd", "Power", 85),
    "JSWENERGY.NS": ("JSW Energy", "Power", 485),
    "TORNTPOWER.NS": ("Torrent Power", "Power", 585),
    "CESC.NS": ("CESC Ltd", "Power", 115),
    "IEX.NS": ("Indian Energy Exchange", "Power", 145),
    "GAIL.NS": ("GAIL India", "Oil & Gas", 145),
    "IOC.NS": ("Indian Oil Corp", "Oil & Gas", 145),
    "HINDPETRO.NS": ("HPCL", "Oil & Gas", 385),
    "PETRONET.NS": ("Petronet LNG", "Oil & Gas", 285),
    "MGL.NS": ("Mahanagar Gas", "Oil & Gas", 1180),
    "IGL.NS": ("Indraprastha Gas", "Oil & Gas", 485),
    "GSPL.NS": ("Gujarat State Petronet", "Oil & Gas", 285),
    "ATGL.NS": ("Adani Total Gas", "Oil & Gas", 685),

    # METALS & MINING
    "VEDL.NS": ("Vedanta", "Metals", 285),
    "NMDC.NS": ("NMDC", "Mining", 185),
    "SAIL.NS": ("SAIL", "Steel", 115),
    "JINDALSTEL.NS": ("Jindal Steel & Power", "Steel", 685),
    "NATIONALUM.NS": ("National Aluminium", "Metals", 115),
    "MOIL.NS": ("MOIL Ltd", "Mining", 285),
    "WELCORP.NS": ("Welspun Corp", "Steel", 485),
    "RATNAMANI.NS": ("Ratnamani Metals", "Steel", 2850),
    "APLAPOLLO.NS": ("APL Apollo Tubes", "Steel", 1450),

    # CAPITAL GOODS & INFRASTRUCTURE
    "ABB.NS": ("ABB India", "Capital Goods", 4850),
    "BHEL.NS": ("BHEL", "Capital Goods", 185),
    "CUMMINSIND.NS": ("Cummins India", "Capital Goods", 2250),
    "THERMAX.NS": ("Thermax", "Capital Goods", 2850),
    "GRINDWELL.NS": ("Grindwell Norton", "Capital Goods", 1850),
    "AIAENG.NS": ("AIA Engineering", "Capital Goods", 3250),
    "KEC.NS": ("KEC International", "Infrastructure", 685),
    "KALPATPOWR.NS": ("Kalpataru Projects", "Infrastructure", 585),
    "IRB.NS": ("IRB Infra", "Infrastructure", 48),
    "PNCINFRA.NS": ("PNC Infratech", "Infrastructure", 385),
    "NCC.NS": ("NCC Ltd", "Construction", 185),
    "HCC.NS": ("HCC", "Construction", 28),
    "NBCC.NS": ("NBCC India", "Construction", 85),

    # REAL ESTATE
    "GODREJPROP.NS": ("Godrej Properties", "Real Estate", 2250),
    "OBEROIRLTY.NS": ("Oberoi Realty", "Real Estate", 1450),
    "PRESTIGE.NS": ("Prestige Estates", "Real Estate", 785),
    "BRIGADE.NS": ("Brigade Enterprises", "Real Estate", 685),
    "SOBHA.NS": ("Sobha Ltd", "Real Estate", 785),
    "PHOENIXLTD.NS": ("Phoenix Mills", "Real Estate", 1650),
    "LODHA.NS": ("Macrotech Developers", "Real Estate", 1085),
    "SUNTECK.NS": ("Sunteck Realty", "Real Estate", 485),

    # CONSUMER DURABLES
    "VOLTAS.NS": ("Voltas", "Consumer Durables", 1085),
    "BLUESTARCO.NS": ("Blue Star", "Consumer Durables", 1285),
    "WHIRLPOOL.NS": ("Whirlpool India", "Consumer Durables", 1450),
    "CROMPTON.NS": ("Crompton Greaves CE", "Consumer Durables", 385),
    "VGUARD.NS": ("V-Guard Industries", "Consumer Durables", 385),
    "SYMPHONY.NS": ("Symphony", "Consumer Durables", 1085),
    "RAJESHEXPO.NS": ("Rajesh Exports", "Consumer Goods", 485),
    "KALYAN.NS": ("Kalyan Jewellers", "Consumer Goods", 385),
    "BATAINDIA.NS": ("Bata India", "Consumer Goods", 1450),
    "RELAXO.NS": ("Relaxo Footwears", "Consumer Goods", 785),
    "PAGEIND.NS": ("Page Industries", "Consumer Goods", 38500),
    "TRENT.NS": ("Trent Ltd", "Retail", 3850),
    "SHOPERSTOP.NS": ("Shoppers Stop", "Retail", 785),

    # CHEMICALS
    "SRF.NS": ("SRF Ltd", "Chemicals", 2450),
    "ATUL.NS": ("Atul Ltd", "Chemicals", 6850),
    "DEEPAKNI.NS": ("Deepak Nitrite", "Chemicals", 2180),
    "NAVINFLUOR.NS": ("Navin Fluorine", "Chemicals", 3850),
    "CLEAN.NS": ("Clean Science", "Chemicals", 1450),
    "FINEORG.NS": ("Fine Organic", "Chemicals", 4850),
    "ALKYLAMINE.NS": ("Alkyl Amines", "Chemicals", 2250),
    "AARTIIND.NS": ("Aarti Industries", "Chemicals", 585),
    "GALAXYSURF.NS": ("Galaxy Surfactants", "Chemicals", 2850),
    "SUDARSCHEM.NS": ("Sudarshan Chemicals", "Chemicals", 485),

    # TEXTILES
    "RAYMOND.NS": ("Raymond", "Textiles", 1650),
    "ARVIND.NS": ("Arvind Ltd", "Textiles", 385),
    "WELSPUNIND.NS": ("Welspun India", "Textiles", 145),
    "TRIDENT.NS": ("Trident Ltd", "Textiles", 35),
    "KPR.NS": ("KPR Mill", "Textiles", 785),
    "GOKALDAS.NS": ("Gokaldas Exports", "Textiles", 785),

    # MEDIA & ENTERTAINMENT
    "PVRINOX.NS": ("PVR INOX", "Media", 1450),
    "ZEEL.NS": ("Zee Entertainment", "Media", 185),
    "SUNTV.NS": ("Sun TV Network", "Media", 585),
    "NETWORK18.NS": ("Network18", "Media", 85),
    "TV18BRDCST.NS": ("TV18 Broadcast", "Media", 45),

    # TELECOM
    "IDEA.NS": ("Vodafone Idea", "Telecom", 12),
    "TATACOMM.NS": ("Tata Communications", "Telecom", 1850),
    "INDUSTOWER.NS": ("Indus Towers", "Telecom", 285),

    # LOGISTICS & TRANSPORT
    "DELHIVERY.NS": ("Delhivery", "Logistics", 385),
    "BLUEDART.NS": ("Blue Dart Express", "Logistics", 6850),
    "CONCOR.NS": ("Container Corp", "Logistics", 685),
    "VRL.NS": ("VRL Logistics", "Logistics", 585),
    "MAHLOG.NS": ("Mahindra Logistics", "Logistics", 385),
    "GATEWAY.NS": ("Gateway Distriparks", "Logistics", 85),
    "ALLCARGO.NS": ("Allcargo Logistics", "Logistics", 385),

    # NBFC & FINANCIAL SERVICES
    "BAJAJHLDNG.NS": ("Bajaj Holdings", "Finance", 7850),
    "CHOLAFIN.NS": ("Cholamandalam Finance", "Finance", 1180),
    "MUTHOOTFIN.NS": ("Muthoot Finance", "Finance", 1450),
    "MANAPPURAM.NS": ("Manappuram Finance", "Finance", 185),
    "L&TFH.NS": ("L&T Finance Holdings", "Finance", 145),
    "SBICARD.NS": ("SBI Cards", "Finance", 785),
    "SHRIRAMFIN.NS": ("Shriram Finance", "Finance", 2250),
    "M&MFIN.NS": ("M&M Financial Services", "Finance", 285),
    "POONAWALLA.NS": ("Poonawalla Fincorp", "Finance", 385),
    "CREDITACC.NS": ("CreditAccess Grameen", "Finance", 1450),
    "IIFL.NS": ("IIFL Finance", "Finance", 485),

    # DEFENCE & AEROSPACE
    "HAL.NS": ("Hindustan Aeronautics", "Defence", 3850),
    "BEL.NS": ("Bharat Electronics", "Defence", 185),
    "BEML.NS": ("BEML", "Defence", 2850),
    "BDL.NS": ("Bharat Dynamics", "Defence", 1085),
    "COCHINSHIP.NS": ("Cochin Shipyard", "Defence", 785),
    "GRSE.NS": ("Garden Reach Shipbuilders", "Defence", 785),
    "MAZAGON.NS": ("Mazagon Dock", "Defence", 2450),

    # PSU STOCKS
    "IRCTC.NS": ("IRCTC", "Travel", 785),
    "IRFC.NS": ("Indian Railway Finance", "Finance", 145),
    "RVNL.NS": ("Rail Vikas Nigam", "Infrastructure", 185),
    "RECLTD.NS": ("REC Ltd", "Finance", 485),
    "PFC.NS": ("Power Finance Corp", "Finance", 385),
    "HUDCO.NS": ("HUDCO", "Finance", 185),
    "HFCL.NS": ("HFCL Ltd", "Telecom", 85),
    "HINDCOPPER.NS": ("Hindustan Copper", "Metals", 185),
    "OFSS.NS": ("Oracle Financial Services", "IT", 8850),

    # SUGAR
    "BALRAMCHIN.NS": ("Balrampur Chini", "Sugar", 385),
    "RENUKA.NS": ("Shree Renuka Sugars", "Sugar", 45),
    "DWARIKESH.NS": ("Dwarikesh Sugar", "Sugar", 85),
    "TRIVENI.NS": ("Triveni Engineering", "Sugar", 385),

    # FERTILIZERS & AGRI
    "COROMANDEL.NS": ("Coromandel International", "Fertilizers", 1180),
    "CHAMBLFERT.NS": ("Chambal Fertilizers", "Fertilizers", 385),
    "GNFC.NS": ("GNFC", "Fertilizers", 585),
    "GSFC.NS": ("GSFC", "Fertilizers", 185),
    "RCF.NS": ("Rashtriya Chemicals", "Fertilizers", 145),
    "PIIND.NS": ("PI Industries", "Agrochemicals", 3450),
    "UPL.NS": ("UPL Ltd", "Agrochemicals", 485),
    "BAYER.NS": ("Bayer CropScience", "Agrochemicals", 5850),
    "RALLIS.NS": ("Rallis India", "Agrochemicals", 285),

    # PAPER & PACKAGING
    "JKPAPER.NS": ("JK Paper", "Paper", 385),
    "TNPL.NS": ("Tamil Nadu Newsprint", "Paper", 285),
    "HUHTAMAKI.NS": ("Huhtamaki India", "Packaging", 285),
    "UFLEX.NS": ("Uflex", "Packaging", 485),

    # GEMS & JEWELLERY
    "TITAN.NS": ("Titan", "Jewellery", 3180),
    "TANLA.NS": ("Tanla Platforms", "IT", 985),
    "PCJEWELLER.NS": ("PC Jeweller", "Jewellery", 85),

    # EDUCATION
    "ABORETUM.NS": ("Aptech", "Education", 285),

    # HOTELS & TRAVEL
    "INDHOTEL.NS": ("Indian Hotels", "Hotels", 485),
    "LEMONTRE.NS": ("Lemon Tree Hotels", "Hotels", 115),
    "CHALET.NS": ("Chalet Hotels", "Hotels", 685),
    "MAHINDCIE.NS": ("Mahindra CIE", "Auto Ancillary", 485),
    "EASEMYTRIP.NS": ("Easy Trip Planners", "Travel", 35),
    "THOMASCOOK.NS": ("Thomas Cook India", "Travel", 145),
    "YATRA.NS": ("Yatra Online", "Travel", 115),
}

# symbol: (name, base price)
INDICES: dict[str, tuple[str, float]] = {
    # Major Indices
    "^NSEI": ("NIFTY 50", 23250),
    "^BSESN": ("SENSEX", 76850),
    "^NSEBANK": ("NIFTY Bank", 49250),
    "^CNXIT": ("NIFTY IT", 42580),

    # Sectoral Indices
    "^CNXPHARMA": ("NIFTY Pharma", 21250),
    "^CNXAUTO": ("NIFTY Auto", 23850),
    "^CNXFMCG": ("NIFTY FMCG", 56450),
    "^CNXMETAL": ("NIFTY Metal", 9150),
    "^CNXREALTY": ("NIFTY Realty", 1085),
    "^CNXENERGY": ("NIFTY Energy", 35450),
    "^CNXINFRA": ("NIFTY Infra", 8250),
    "^CNXPSUBANK": ("NIFTY PSU Bank", 7250),
    "^CNXFIN": ("NIFTY Financial Services", 23450),
    "^CNXMEDIA": ("NIFTY Media", 1950),

    # Broader Indices
    "^NSMIDCP": ("NIFTY Midcap 50", 15850),
    "^NSEMDCP100": ("NIFTY Midcap 100", 55250),
    "^NSESMLCP": ("NIFTY Smallcap 100", 18450),
    "^NIFTY500": ("NIFTY 500", 21850),
}


@lru_cache
def load_catalog() -> Mapping[str, CatalogEntry]:
    """Stocks followed by indices, as a read-only mapping."""
    entries = {
        symbol: CatalogEntry(symbol, name, sector, float(base))
        for symbol, (name, sector, base) in STOCKS.items()
    }
    entries.update(
        (symbol, CatalogEntry(symbol, name, INDEX_SECTOR, float(base)))
        for symbol, (name, base) in INDICES.items()
    )
    return MappingProxyType(entries)
