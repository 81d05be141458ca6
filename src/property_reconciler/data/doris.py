"""DORIS (Department of Registration and Stamps) mock dataset, keyed by propertyId."""

DORIS_DATABASE: dict[str, dict] = {
    "MH1234567": {
        "propertyId": "MH1234567",
        "registrationNumber": "REG/MH/2022/12345",
        "ownerDetails": [
            {
                "name": "Rajesh Kumar",
                "identificationNumber": "ABCDE1234F",
                "identificationType": "PAN",
                "ownershipPercentage": 50,
                "ownershipType": "JOINT",
                "contactInformation": {
                    "address": "123, Pali Hill, Bandra West, Mumbai - 400050",
                    "phone": "+91-9876543210",
                    "email": "rajesh.kumar@example.com",
                },
            },
            {
                "name": "Priya Kumar",
                "identificationNumber": "FGHIJ5678K",
                "identificationType": "PAN",
                "ownershipPercentage": 50,
                "ownershipType": "JOINT",
                "contactInformation": {
                    "address": "123, Pali Hill, Bandra West, Mumbai - 400050",
                    "phone": "+91-9876543211",
                },
            },
        ],
        "propertyDetails": {
            "address": "123, Pali Hill, Bandra West, Mumbai - 400050",
            "area": "1200",
            "areaUnit": "SQ_FT",
            "type": "RESIDENTIAL",
            "subType": "APARTMENT",
            "description": "3 BHK apartment on the 7th floor with sea view",
            "coordinates": {"latitude": 19.0674, "longitude": 72.8263},
            "landMark": "Near Pali Market",
        },
        "encumbrances": [
            {
                "type": "MORTGAGE",
                "holder": "State Bank of India",
                "amount": 5000000,
                "dateCreated": "2022-01-15",
                "dateExpiry": "2042-01-14",
                "status": "ACTIVE",
                "details": "Home loan against property",
                "documentReference": "MORT/MH/2022/00123",
            }
        ],
        "transactionHistory": [
            {
                "date": "2022-01-10",
                "type": "SALE",
                "parties": [
                    {"role": "SELLER", "name": "Suresh Mehta", "identificationNumber": "KLMNO9876P"},
                    {"role": "BUYER", "name": "Rajesh Kumar", "identificationNumber": "ABCDE1234F"},
                    {"role": "BUYER", "name": "Priya Kumar", "identificationNumber": "FGHIJ5678K"},
                ],
                "amount": 25000000,
                "documentReference": "SD/MH/2022/12345",
                "registrationNumber": "REG/MH/2022/12345",
                "registrationDate": "2022-01-12",
                "registrationOffice": "Sub-Registrar Office, Bandra",
            },
            {
                "date": "2015-06-18",
                "type": "SALE",
                "parties": [
                    {"role": "SELLER", "name": "Harbour Homes Pvt Ltd"},
                    {"role": "BUYER", "name": "Suresh Mehta", "identificationNumber": "KLMNO9876P"},
                ],
                "amount": 14500000,
                "documentReference": "SD/MH/2015/04521",
            },
        ],
        "documents": [
            {
                "type": "SALE_DEED",
                "number": "SD/MH/2022/12345",
                "issuedDate": "2022-01-12",
                "issuedBy": "Sub-Registrar Office, Bandra",
                "status": "VALID",
            },
            {
                "type": "PROPERTY_CARD",
                "number": "PC/MUM/BW/45678",
                "issuedDate": "2022-02-01",
                "issuedBy": "Municipal Corporation of Greater Mumbai",
                "status": "VALID",
            },
        ],
        "registrationDetails": {
            "registrationDate": "2022-01-12",
            "registrationOffice": "Sub-Registrar Office, Bandra",
            "registrationFee": 30000,
            "stampDuty": 1250000,
        },
        "lastUpdated": "2023-01-20T10:30:00Z",
        "dataSource": "DORIS",
        "dorisSpecificField": "Sample DORIS specific data",
    },
    "MH7654321": {
        "propertyId": "MH7654321",
        "registrationNumber": "REG/MH/2021/54321",
        "ownerDetails": [
            {
                "name": "ABC Properties Private Limited",
                "identificationNumber": "U12345MH2010PLC123456",
                "identificationType": "CIN",
                "ownershipPercentage": 100,
                "ownershipType": "CORPORATE",
                "contactInformation": {
                    "address": "10th Floor, Express Towers, Nariman Point, Mumbai - 400021",
                    "phone": "+91-2266778899",
                    "email": "legal@abcproperties.in",
                },
            }
        ],
        "propertyDetails": {
            "address": "456, Marine Drive, Mumbai - 400020",
            "area": "5000",
            "areaUnit": "SQ_FT",
            "type": "COMMERCIAL",
            "subType": "OFFICE",
            "coordinates": {"latitude": 18.9432, "longitude": 72.8236},
        },
        "encumbrances": [],
        "transactionHistory": [
            {
                "date": "2021-06-20",
                "type": "SALE",
                "parties": [
                    {"role": "SELLER", "name": "Marine Estates LLP"},
                    {"role": "BUYER", "name": "ABC Properties Private Limited"},
                ],
                "amount": 120000000,
                "documentReference": "SD/MH/2021/54321",
                "registrationNumber": "REG/MH/2021/54321",
                "registrationDate": "2021-06-22",
                "registrationOffice": "Sub-Registrar Office, Fort",
            }
        ],
        "documents": [
            {
                "type": "SALE_DEED",
                "number": "SD/MH/2021/54321",
                "issuedDate": "2021-06-22",
                "issuedBy": "Sub-Registrar Office, Fort",
                "status": "VALID",
            }
        ],
        "registrationDetails": {
            "registrationDate": "2021-06-22",
            "registrationOffice": "Sub-Registrar Office, Fort",
            "registrationFee": 30000,
            "stampDuty": 6000000,
        },
        "lastUpdated": "2022-11-05T09:12:00Z",
        "dataSource": "DORIS",
        "dorisSpecificField": "Sample DORIS specific data",
    },
    "DL8765432": {
        "propertyId": "DL8765432",
        "registrationNumber": "REG/DL/2020/87654",
        "ownerDetails": [
            {
                "name": "Amit Sharma",
                "identificationNumber": "DEFGH1234I",
                "identificationType": "PAN",
                "ownershipPercentage": 100,
                "ownershipType": "SOLE",
                "contactInformation": {
                    "address": "789, Vasant Vihar, New Delhi - 110057",
                    "phone": "+91-9876543213",
                    "email": "amit.sharma@example.com",
                },
            }
        ],
        "propertyDetails": {
            "address": "789, Vasant Vihar, New Delhi - 110057",
            "area": "3200",
            "areaUnit": "SQ_FT",
            "type": "RESIDENTIAL",
            "subType": "INDEPENDENT_HOUSE",
            "coordinates": {"latitude": 28.5603, "longitude": 77.1595},
            "boundaries": {
                "north": "Road",
                "south": "Plot 790",
                "east": "Park",
                "west": "Plot 788",
            },
        },
        "encumbrances": [
            {
                "type": "MORTGAGE",
                "holder": "HDFC Bank",
                "amount": 15000000,
                "dateCreated": "2020-08-15",
                "dateExpiry": "2040-08-14",
                "status": "ACTIVE",
                "details": "Home loan against property",
            }
        ],
        "transactionHistory": [
            {
                "date": "2020-08-01",
                "type": "SALE",
                "parties": [
                    {"role": "SELLER", "name": "Kavita Malhotra"},
                    {"role": "BUYER", "name": "Amit Sharma", "identificationNumber": "DEFGH1234I"},
                ],
                "amount": 42000000,
                "documentReference": "SD/DL/2020/87654",
                "registrationNumber": "REG/DL/2020/87654",
                "registrationDate": "2020-08-03",
                "registrationOffice": "Sub-Registrar Office, Vasant Vihar",
            }
        ],
        "documents": [
            {
                "type": "SALE_DEED",
                "number": "SD/DL/2020/87654",
                "issuedDate": "2020-08-03",
                "issuedBy": "Sub-Registrar Office, Vasant Vihar",
                "status": "VALID",
            }
        ],
        "registrationDetails": {
            "registrationDate": "2020-08-03",
            "registrationOffice": "Sub-Registrar Office, Vasant Vihar",
            "registrationFee": 1100,
            "stampDuty": 2520000,
        },
        "lastUpdated": "2022-07-18T13:05:00Z",
        "dataSource": "DORIS",
        "dorisSpecificField": "Sample DORIS specific data",
    },
}
